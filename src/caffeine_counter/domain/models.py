"""Domain models for users and identity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class IdentityClaims:
    """Verified attributes returned by the identity provider."""

    subject: str
    email: str
    name: str
    picture: str | None


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    google_id: str
    email: str
    name: str
    picture: str | None
    created_at: datetime | None = None
    last_login_at: datetime | None = None
