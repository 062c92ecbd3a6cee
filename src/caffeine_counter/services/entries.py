"""Services for recording and removing caffeine entries."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from caffeine_counter.domain.entries import CaffeineEntry, NewEntry
from caffeine_counter.domain.errors import Forbidden, NotFound, ValidationFailed
from caffeine_counter.domain.models import UserRecord

logger = logging.getLogger(__name__)

RECENT_ENTRIES_LIMIT = 50


class EntryRepository(Protocol):
    """Persistence interface for caffeine entries."""

    def create_entry(self, entry: NewEntry) -> CaffeineEntry:
        """Insert an entry and return it with its id."""

    def get_entry(self, entry_id: UUID) -> CaffeineEntry | None:
        """Return an entry by id, if present."""

    def list_recent_entries(self, limit: int) -> list[CaffeineEntry]:
        """Return the newest entries first."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry by id."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EntryService:
    """Application service for caffeine entries."""

    repository: EntryRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    def record(  # noqa: PLR0913
        self,
        user: UserRecord,
        drink_name: str | None,
        size_name: str | None,
        caffeine_mg: object,
        custom_description: str | None = None,
        is_custom_drink: bool | None = None,
    ) -> CaffeineEntry:
        """Validate and store a new entry for the user."""
        drink = (drink_name or "").strip()
        size = (size_name or "").strip()
        amount = parse_caffeine_mg(caffeine_mg)
        if not drink or not size or amount is None:
            raise ValidationFailed(
                "Drink name, size name, and positive caffeine amount are required"
            )
        entry = self.repository.create_entry(
            NewEntry(
                drink_name=drink,
                size_name=size,
                full_name=f"{size} {drink}".strip(),
                caffeine_mg=amount,
                custom_description=(custom_description or "").strip(),
                timestamp=self.clock(),
                is_custom_drink=bool(is_custom_drink),
                user_id=user.google_id,
                user_name=user.name,
                user_avatar=user.picture,
            )
        )
        logger.info(
            "Recorded caffeine entry",
            extra={"entry_id": str(entry.id), "user_id": user.google_id},
        )
        return entry

    def list_recent(self, limit: int = RECENT_ENTRIES_LIMIT) -> list[CaffeineEntry]:
        """Return the most recent entries."""
        return self.repository.list_recent_entries(limit)

    def delete(self, user: UserRecord, entry_id: UUID | None) -> None:
        """Delete an entry owned by the user."""
        entry = self.repository.get_entry(entry_id) if entry_id else None
        if entry is None:
            raise NotFound("Entry not found")
        if entry.user_id != user.google_id:
            raise Forbidden("You can only delete your own entries")
        self.repository.delete_entry(entry.id)
        logger.info(
            "Deleted caffeine entry",
            extra={"entry_id": str(entry.id), "user_id": user.google_id},
        )


def parse_caffeine_mg(raw: object) -> float | None:
    """Return a positive finite caffeine amount, or None when invalid."""
    if isinstance(raw, bool) or raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value
