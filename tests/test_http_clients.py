"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from caffeine_counter.adapters.google_token_verifier import HttpxGoogleTokenVerifier
from caffeine_counter.domain.errors import InvalidToken

CLIENT_ID = "client-id.apps.googleusercontent.com"


def _verifier(handler) -> HttpxGoogleTokenVerifier:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxGoogleTokenVerifier(
        client_id=CLIENT_ID, http_client=httpx.AsyncClient(transport=transport)
    )


def _claims(**overrides) -> dict[str, object]:  # type: ignore[no-untyped-def]
    payload: dict[str, object] = {
        "aud": CLIENT_ID,
        "iss": "https://accounts.google.com",
        "sub": "1234567890",
        "email": "alice@example.com",
        "email_verified": "true",
        "name": "Alice",
        "picture": "https://example.com/alice.png",
    }
    payload.update(overrides)
    return payload


def test_google_verifier_returns_claims() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/tokeninfo"
        assert request.url.params["id_token"] == "good-token"
        return httpx.Response(200, json=_claims())

    claims = asyncio.run(_verifier(handler).verify("good-token"))

    assert claims.subject == "1234567890"
    assert claims.email == "alice@example.com"
    assert claims.picture == "https://example.com/alice.png"


def test_google_verifier_falls_back_to_email_for_name() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_claims(name=None, picture=None))

    claims = asyncio.run(_verifier(handler).verify("good-token"))

    assert claims.name == "alice@example.com"
    assert claims.picture is None


def test_google_verifier_rejects_invalid_tokens() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "invalid_token"})

    with pytest.raises(InvalidToken):
        asyncio.run(_verifier(handler).verify("bad-token"))


@pytest.mark.parametrize(
    "payload",
    [
        _claims(aud="someone-else"),
        _claims(iss="https://evil.example.com"),
        _claims(sub=None),
        _claims(email=None),
        _claims(email_verified="false"),
        _claims(email_verified=None),
    ],
)
def test_google_verifier_checks_claims(payload) -> None:  # type: ignore[no-untyped-def]
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(InvalidToken):
        asyncio.run(_verifier(handler).verify("token"))


def test_google_verifier_requires_token() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(InvalidToken):
        asyncio.run(_verifier(handler).verify(""))
