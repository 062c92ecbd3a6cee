"""Supabase-backed login session repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from caffeine_counter.domain.sessions import SessionRecord
from caffeine_counter.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for login sessions."""

    client: Client

    def create_session(
        self, session_id: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Create a session row and return it."""
        response = (
            self.client.table("auth_sessions")
            .insert(
                {
                    "id": session_id,
                    "user_id": str(user_id),
                    "created_at": datetime.now(tz=UTC).isoformat(),
                    "expires_at": expires_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return _parse_session(response.data[0])

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""
        response = (
            self.client.table("auth_sessions")
            .select("id, user_id, created_at, expires_at")
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_session(self, session_id: str) -> None:
        """Delete a session row."""
        self.client.table("auth_sessions").delete().eq("id", session_id).execute()


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        id=str(row["id"]),
        user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        expires_at=datetime.fromisoformat(str(row["expires_at"])),
    )
