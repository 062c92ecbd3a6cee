"""Login session handling backed by a session store.

The session cookie is an HS256 JWT whose ``sid`` claim names a row in the
session store. Expiry is enforced against the stored row, so a session can be
revoked server-side before its cookie goes stale.
"""

import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

import jwt

from caffeine_counter.domain.sessions import SessionRecord

SESSION_COOKIE_NAME = "caffeine_session"
ALGORITHM = "HS256"


class SessionRepository(Protocol):
    """Persistence interface for login sessions."""

    def create_session(
        self, session_id: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Create a session row and return it."""

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""

    def delete_session(self, session_id: str) -> None:
        """Delete a session by id."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Creates, resolves and destroys login sessions."""

    repository: SessionRepository
    secret: str
    ttl_hours: int = 24 * 7
    clock: Callable[[], datetime] = field(default=_utc_now)

    def start(self, user_id: UUID) -> str:
        """Create a session for the user and return the signed cookie value."""
        session_id = secrets.token_urlsafe(32)
        expires_at = self.clock() + timedelta(hours=self.ttl_hours)
        self.repository.create_session(session_id, user_id, expires_at)
        return jwt.encode(
            {"sid": session_id, "type": "session"}, self.secret, algorithm=ALGORITHM
        )

    def resolve(self, cookie_value: str | None) -> SessionRecord | None:
        """Return the live session for a cookie value, if any."""
        session_id = self._session_id(cookie_value)
        if session_id is None:
            return None
        session = self.repository.get_session(session_id)
        if session is None:
            return None
        if session.expires_at <= self.clock():
            self.repository.delete_session(session_id)
            return None
        return session

    def end(self, cookie_value: str | None) -> None:
        """Destroy the session behind a cookie value."""
        session_id = self._session_id(cookie_value)
        if session_id is not None:
            self.repository.delete_session(session_id)

    @property
    def max_age_seconds(self) -> int:
        """Cookie lifetime matching the session TTL."""
        return self.ttl_hours * 3600

    def _session_id(self, cookie_value: str | None) -> str | None:
        if not cookie_value:
            return None
        try:
            payload = jwt.decode(cookie_value, self.secret, algorithms=[ALGORITHM])
        except jwt.InvalidTokenError:
            return None
        session_id = payload.get("sid")
        if payload.get("type") != "session" or not isinstance(session_id, str):
            return None
        return session_id
