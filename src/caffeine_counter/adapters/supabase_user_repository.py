"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from caffeine_counter.domain.models import IdentityClaims, UserRecord
from caffeine_counter.services.users import UserRepository

_COLUMNS = "id, google_id, email, name, picture, created_at, last_login_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        """Return the user for a Google subject id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("google_id", google_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user by id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, claims: IdentityClaims) -> UserRecord:
        """Create a new user row and return it."""
        now = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("users")
            .insert(
                {
                    "google_id": claims.subject,
                    "email": claims.email,
                    "name": claims.name,
                    "picture": claims.picture,
                    "created_at": now,
                    "last_login_at": now,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def record_login(self, user_id: UUID, claims: IdentityClaims) -> UserRecord:
        """Refresh profile fields and last_login_at for a user."""
        response = (
            self.client.table("users")
            .update(
                {
                    "email": claims.email,
                    "name": claims.name,
                    "picture": claims.picture,
                    "last_login_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        google_id=str(row["google_id"]),
        email=str(row.get("email", "")),
        name=str(row.get("name", "")),
        picture=row.get("picture"),
        created_at=_parse_timestamp(row.get("created_at")),
        last_login_at=_parse_timestamp(row.get("last_login_at")),
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
