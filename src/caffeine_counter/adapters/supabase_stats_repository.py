"""Supabase repository for entry statistics."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from caffeine_counter.domain.stats import EntryRow
from caffeine_counter.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_entry_rows(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[EntryRow]:
        """Return entries in the time range, newest first."""
        query = self.client.table("caffeine_entries").select(
            "timestamp, caffeine_mg, user_id, user_name, user_avatar"
        )
        if start is not None:
            query = query.gte("timestamp", start.isoformat())
        if end is not None:
            query = query.lt("timestamp", end.isoformat())
        response = query.order("timestamp", desc=True).execute()
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> EntryRow:
    user_id_raw = row.get("user_id")
    return EntryRow(
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
        caffeine_mg=float(row.get("caffeine_mg", 0.0)),
        user_id=str(user_id_raw) if user_id_raw else None,
        user_name=str(row.get("user_name") or ""),
        user_avatar=row.get("user_avatar"),
    )
