"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from caffeine_counter.domain.models import IdentityClaims, UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        """Return the user for a Google subject id, if present."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user by id, if present."""

    def create_user(self, claims: IdentityClaims) -> UserRecord:
        """Create and return a new user record."""

    def record_login(self, user_id: UUID, claims: IdentityClaims) -> UserRecord:
        """Refresh profile fields and the last login timestamp."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def upsert_from_claims(self, claims: IdentityClaims) -> UserRecord:
        """Ensure a user exists for the verified identity and return it."""
        existing = self.repository.get_by_google_id(claims.subject)
        if existing:
            return self.repository.record_login(existing.id, claims)
        return self.repository.create_user(claims)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)
