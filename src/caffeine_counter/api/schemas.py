"""Request models and JSON serializers for the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from caffeine_counter.domain.drinks import DrinkType
from caffeine_counter.domain.entries import CaffeineEntry
from caffeine_counter.domain.models import UserRecord
from caffeine_counter.domain.stats import ChartSeries, LeaderboardRow, TotalSummary


class EntryCreateRequest(BaseModel):
    """Payload for recording a drink."""

    model_config = ConfigDict(populate_by_name=True)

    drink_name: str | None = Field(default=None, alias="drinkName")
    size_name: str | None = Field(default=None, alias="sizeName")
    caffeine_mg: Any = Field(default=None, alias="caffeineMg")
    custom_description: str | None = Field(default=None, alias="customDescription")
    is_custom_drink: bool | None = Field(default=None, alias="isCustomDrink")


class DrinkTypeCreateRequest(BaseModel):
    """Payload for adding a drink type."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    sizes: list[dict[str, Any]] | None = None


class LoginRequest(BaseModel):
    """Payload carrying a Google ID token."""

    token: str | None = None


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": str(user.id),
        "googleId": user.google_id,
        "email": user.email,
        "name": user.name,
        "picture": user.picture,
        "lastLoginAt": user.last_login_at.isoformat() if user.last_login_at else None,
    }


def serialize_entry(entry: CaffeineEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "drinkName": entry.drink_name,
        "sizeName": entry.size_name,
        "fullName": entry.full_name,
        "caffeineMg": entry.caffeine_mg,
        "customDescription": entry.custom_description,
        "timestamp": entry.timestamp.isoformat(),
        "isCustomDrink": entry.is_custom_drink,
        "userId": entry.user_id,
        "userName": entry.user_name,
        "userAvatar": entry.user_avatar,
    }


def serialize_drink_type(drink_type: DrinkType) -> dict[str, object]:
    return {
        "id": str(drink_type.id),
        "name": drink_type.name,
        "imageUrl": drink_type.image_url,
        "sizes": [
            {"name": size.name, "caffeineMg": size.caffeine_mg}
            for size in drink_type.sizes
        ],
        "deleted": drink_type.deleted,
        "createdAt": drink_type.created_at.isoformat(),
    }


def serialize_total(summary: TotalSummary) -> dict[str, object]:
    return {"total": summary.total, "count": summary.count}


def serialize_leaderboard_row(row: LeaderboardRow) -> dict[str, object]:
    return {
        "userId": row.user_id,
        "userName": row.user_name,
        "userAvatar": row.user_avatar,
        "totalCaffeine": row.total_caffeine,
        "entryCount": row.entry_count,
    }


def serialize_chart(series: ChartSeries) -> dict[str, object]:
    return {"labels": series.labels, "values": series.values}
