"""Authentication endpoints and the session dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Cookie, Depends, Request, Response

from caffeine_counter.api.schemas import LoginRequest, serialize_user
from caffeine_counter.domain.models import UserRecord  # noqa: TC001
from caffeine_counter.services.sessions import SESSION_COOKIE_NAME

if TYPE_CHECKING:
    from caffeine_counter.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def require_user(
    request: Request,
    session_cookie: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> UserRecord:
    """Resolve the session cookie to a user, failing with 401."""
    container: AppContainer = request.app.state.container
    return container.auth_service.current_user(session_cookie)


@router.post("/google")
async def google_login(
    payload: LoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Verify a Google ID token and start a session."""
    container: AppContainer = request.app.state.container
    user, cookie_value = await container.auth_service.login(payload.token)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        cookie_value,
        max_age=container.auth_service.session_service.max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=container.settings.session_cookie_secure,
    )
    return {"success": True, "user": serialize_user(user)}


@router.get("/check")
async def check_session(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the user of the current session."""
    return serialize_user(user)


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    session_cookie: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> dict[str, object]:
    """Destroy the current session and clear its cookie."""
    container: AppContainer = request.app.state.container
    container.auth_service.logout(session_cookie)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"success": True}
