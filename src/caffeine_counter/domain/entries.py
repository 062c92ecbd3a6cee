"""Domain models for caffeine entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CaffeineEntry:
    """A single recorded drink."""

    id: UUID
    drink_name: str
    size_name: str
    full_name: str
    caffeine_mg: float
    custom_description: str
    timestamp: datetime
    is_custom_drink: bool
    user_id: str
    user_name: str
    user_avatar: str | None


@dataclass(frozen=True)
class NewEntry:
    """Validated data for an entry that has not been stored yet."""

    drink_name: str
    size_name: str
    full_name: str
    caffeine_mg: float
    custom_description: str
    timestamp: datetime
    is_custom_drink: bool
    user_id: str
    user_name: str
    user_avatar: str | None
