"""Login flow: token verification, user upsert and session handling."""

import logging
from dataclasses import dataclass

from caffeine_counter.adapters.google_token_verifier import TokenVerifier
from caffeine_counter.domain.errors import Unauthorized
from caffeine_counter.domain.models import UserRecord
from caffeine_counter.services.sessions import SessionService
from caffeine_counter.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Application service for authentication."""

    verifier: TokenVerifier
    user_service: UserService
    session_service: SessionService

    async def login(self, token: str | None) -> tuple[UserRecord, str]:
        """Verify an ID token and return the user with a new session cookie."""
        claims = await self.verifier.verify(token or "")
        user = self.user_service.upsert_from_claims(claims)
        cookie_value = self.session_service.start(user.id)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user, cookie_value

    def current_user(self, cookie_value: str | None) -> UserRecord:
        """Return the user of the session cookie or raise Unauthorized."""
        session = self.session_service.resolve(cookie_value)
        if session is None:
            raise Unauthorized("Not authenticated")
        user = self.user_service.get_user(session.user_id)
        if user is None:
            raise Unauthorized("Not authenticated")
        return user

    def logout(self, cookie_value: str | None) -> None:
        """Destroy the session behind the cookie."""
        self.session_service.end(cookie_value)
