"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from caffeine_counter.adapters.google_token_verifier import HttpxGoogleTokenVerifier
from caffeine_counter.adapters.supabase_drink_type_repository import (
    SupabaseDrinkTypeRepository,
)
from caffeine_counter.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from caffeine_counter.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from caffeine_counter.adapters.supabase_stats_repository import SupabaseStatsRepository
from caffeine_counter.adapters.supabase_user_repository import SupabaseUserRepository
from caffeine_counter.config import Settings, parse_periods
from caffeine_counter.services.auth import AuthService
from caffeine_counter.services.drinks import DrinkTypeService
from caffeine_counter.services.entries import EntryService
from caffeine_counter.services.sessions import SessionService
from caffeine_counter.services.stats import StatsService
from caffeine_counter.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    auth_service: AuthService
    drink_type_service: DrinkTypeService
    entry_service: EntryService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    session_service = SessionService(
        repository=SupabaseSessionRepository(supabase_client),
        secret=resolved_settings.session_secret,
        ttl_hours=resolved_settings.session_ttl_hours,
    )
    token_verifier = HttpxGoogleTokenVerifier.create(
        resolved_settings.google_client_id
    )
    auth_service = AuthService(
        verifier=token_verifier,
        user_service=user_service,
        session_service=session_service,
    )
    stats_service = StatsService(
        repository=SupabaseStatsRepository(supabase_client),
        timezone_name=resolved_settings.app_timezone,
        leaderboard_periods=parse_periods(resolved_settings.leaderboard_periods),
    )

    async def close_resources() -> None:
        await token_verifier.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        auth_service=auth_service,
        drink_type_service=DrinkTypeService(
            SupabaseDrinkTypeRepository(supabase_client)
        ),
        entry_service=EntryService(SupabaseEntryRepository(supabase_client)),
        stats_service=stats_service,
        close_resources=close_resources,
    )
