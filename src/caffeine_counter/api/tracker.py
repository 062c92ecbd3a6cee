"""Drink catalog, entry and statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from caffeine_counter.api.auth import require_user
from caffeine_counter.api.schemas import (
    DrinkTypeCreateRequest,
    EntryCreateRequest,
    serialize_chart,
    serialize_drink_type,
    serialize_entry,
    serialize_leaderboard_row,
    serialize_total,
)
from caffeine_counter.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from caffeine_counter.containers import AppContainer

router = APIRouter(prefix="/api", tags=["tracker"], dependencies=[Depends(require_user)])


@router.get("/types")
async def list_drink_types(request: Request) -> list[dict[str, object]]:
    """Return the live drink catalog sorted by name."""
    container: AppContainer = request.app.state.container
    return [serialize_drink_type(t) for t in container.drink_type_service.list_types()]


@router.post("/types", status_code=status.HTTP_201_CREATED)
async def create_drink_type(
    payload: DrinkTypeCreateRequest, request: Request
) -> dict[str, object]:
    """Add a drink type with its size variants."""
    container: AppContainer = request.app.state.container
    drink_type = container.drink_type_service.create(
        name=payload.name, image_url=payload.image_url, sizes=payload.sizes
    )
    return serialize_drink_type(drink_type)


@router.delete("/types/{drink_type_id}")
async def delete_drink_type(drink_type_id: str, request: Request) -> dict[str, str]:
    """Soft-delete a drink type."""
    container: AppContainer = request.app.state.container
    container.drink_type_service.delete(_parse_id(drink_type_id))
    return {"message": "Drink type deleted successfully"}


@router.get("/entries")
async def list_entries(request: Request) -> list[dict[str, object]]:
    """Return the newest entries."""
    container: AppContainer = request.app.state.container
    return [serialize_entry(e) for e in container.entry_service.list_recent()]


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: EntryCreateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Record a drink for the current user."""
    container: AppContainer = request.app.state.container
    entry = container.entry_service.record(
        user,
        drink_name=payload.drink_name,
        size_name=payload.size_name,
        caffeine_mg=payload.caffeine_mg,
        custom_description=payload.custom_description,
        is_custom_drink=payload.is_custom_drink,
    )
    return serialize_entry(entry)


@router.delete("/entries/{entry_id}")
async def delete_entry(
    entry_id: str, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Delete one of the current user's entries."""
    container: AppContainer = request.app.state.container
    container.entry_service.delete(user, _parse_id(entry_id))
    return {"message": "Entry deleted successfully"}


@router.get("/total-today")
async def total_today(request: Request) -> dict[str, object]:
    """Return today's caffeine total."""
    container: AppContainer = request.app.state.container
    return serialize_total(container.stats_service.get_today_total())


@router.get("/total-all")
async def total_all(request: Request) -> dict[str, object]:
    """Return the all-time caffeine total."""
    container: AppContainer = request.app.state.container
    return serialize_total(container.stats_service.get_all_time_total())


@router.get("/leaderboard")
async def leaderboard(
    request: Request, period: str = "week"
) -> list[dict[str, object]]:
    """Return users ranked by caffeine intake."""
    container: AppContainer = request.app.state.container
    rows = container.stats_service.get_leaderboard(period)
    return [serialize_leaderboard_row(row) for row in rows]


@router.get("/caffeine-chart")
async def caffeine_chart(request: Request, period: str = "week") -> dict[str, object]:
    """Return bucketed caffeine totals for the chart."""
    container: AppContainer = request.app.state.container
    return serialize_chart(container.stats_service.get_chart(period))


def _parse_id(raw: str) -> UUID | None:
    try:
        return UUID(raw)
    except ValueError:
        return None
