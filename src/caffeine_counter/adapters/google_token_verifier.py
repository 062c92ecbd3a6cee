"""Google ID token verification through the tokeninfo endpoint."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from caffeine_counter.domain.errors import InvalidToken
from caffeine_counter.domain.models import IdentityClaims

logger = logging.getLogger(__name__)

TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"
_GOOGLE_ISSUERS = {"accounts.google.com", "https://accounts.google.com"}


class TokenVerifier(Protocol):
    """Interface for identity-provider token verification."""

    async def verify(self, token: str) -> IdentityClaims:
        """Return verified identity claims or raise InvalidToken."""


@dataclass
class HttpxGoogleTokenVerifier(TokenVerifier):
    """HTTPX-backed verifier for Google ID tokens."""

    client_id: str
    http_client: httpx.AsyncClient
    tokeninfo_url: str = TOKENINFO_URL

    @classmethod
    def create(cls, client_id: str) -> "HttpxGoogleTokenVerifier":
        """Create a verifier with a managed httpx session."""
        return cls(client_id=client_id, http_client=httpx.AsyncClient())

    async def verify(self, token: str) -> IdentityClaims:
        """Verify an ID token and return its claims."""
        if not token:
            raise InvalidToken("Token is required")
        response = await self.http_client.get(
            self.tokeninfo_url, params={"id_token": token}, timeout=10
        )
        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Google rejected ID token", extra={"status": response.status_code}
            )
            raise InvalidToken("Invalid token")
        payload = response.json()
        if payload.get("aud") != self.client_id:
            raise InvalidToken("Token was issued for another client")
        if payload.get("iss") not in _GOOGLE_ISSUERS:
            raise InvalidToken("Token issuer is not Google")
        subject = payload.get("sub")
        email = payload.get("email")
        if not subject or not email:
            raise InvalidToken("Token is missing identity claims")
        if str(payload.get("email_verified", "")).lower() != "true":
            raise InvalidToken("Token email is not verified")
        return IdentityClaims(
            subject=str(subject),
            email=str(email),
            name=str(payload.get("name") or email),
            picture=payload.get("picture"),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
