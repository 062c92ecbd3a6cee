"""Supabase repository for caffeine entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from caffeine_counter.domain.entries import CaffeineEntry, NewEntry
from caffeine_counter.services.entries import EntryRepository

_TABLE = "caffeine_entries"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase-backed repository for caffeine entries."""

    client: Client

    def create_entry(self, entry: NewEntry) -> CaffeineEntry:
        """Insert an entry and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "drink_name": entry.drink_name,
                    "size_name": entry.size_name,
                    "full_name": entry.full_name,
                    "caffeine_mg": entry.caffeine_mg,
                    "custom_description": entry.custom_description,
                    "timestamp": entry.timestamp.isoformat(),
                    "is_custom_drink": entry.is_custom_drink,
                    "user_id": entry.user_id,
                    "user_name": entry.user_name,
                    "user_avatar": entry.user_avatar,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create caffeine entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: UUID) -> CaffeineEntry | None:
        """Return an entry by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_recent_entries(self, limit: int) -> list[CaffeineEntry]:
        """Return the newest entries first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .order("timestamp", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table(_TABLE).delete().eq("id", str(entry_id)).execute()


def _parse_entry(row: dict[str, object]) -> CaffeineEntry:
    """Parse an entry row into a domain model."""
    return CaffeineEntry(
        id=UUID(str(row["id"])),
        drink_name=str(row.get("drink_name", "")),
        size_name=str(row.get("size_name", "")),
        full_name=str(row.get("full_name", "")),
        caffeine_mg=float(row.get("caffeine_mg", 0.0)),
        custom_description=str(row.get("custom_description") or ""),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
        is_custom_drink=bool(row.get("is_custom_drink", False)),
        user_id=str(row["user_id"]),
        user_name=str(row.get("user_name") or ""),
        user_avatar=row.get("user_avatar"),
    )
