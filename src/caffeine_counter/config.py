"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from caffeine_counter.domain.stats import Period

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    google_client_id: str
    session_secret: str
    session_ttl_hours: int = 24 * 7
    session_cookie_secure: bool = False
    port: int = 3000
    app_timezone: str = "UTC"
    leaderboard_periods: str = "week,month,year,all"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_periods(raw: str | None) -> tuple[str, ...]:
    """Parse leaderboard period names from env, falling back to all periods."""
    known = tuple(period.value for period in Period)
    if raw is None:
        return known
    periods: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value in known and value not in periods:
            periods.append(value)
    return tuple(periods) or known
