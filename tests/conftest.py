"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from caffeine_counter.adapters.google_token_verifier import TokenVerifier
from caffeine_counter.config import Settings
from caffeine_counter.containers import AppContainer
from caffeine_counter.domain.drinks import DrinkType, SizeVariant
from caffeine_counter.domain.entries import CaffeineEntry, NewEntry
from caffeine_counter.domain.errors import DuplicateName, InvalidToken
from caffeine_counter.domain.models import IdentityClaims, UserRecord
from caffeine_counter.domain.sessions import SessionRecord
from caffeine_counter.domain.stats import EntryRow
from caffeine_counter.services.auth import AuthService
from caffeine_counter.services.drinks import DrinkTypeRepository, DrinkTypeService
from caffeine_counter.services.entries import EntryRepository, EntryService
from caffeine_counter.services.sessions import SessionRepository, SessionService
from caffeine_counter.services.stats import StatsRepository, StatsService
from caffeine_counter.services.users import UserRepository, UserService

ALICE = IdentityClaims(
    subject="google-alice",
    email="alice@example.com",
    name="Alice",
    picture="https://example.com/alice.png",
)
BOB = IdentityClaims(
    subject="google-bob", email="bob@example.com", name="Bob", picture=None
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    logins: list[UUID] = field(default_factory=list)

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        for user in self.users.values():
            if user.google_id == google_id:
                return user
        return None

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, claims: IdentityClaims) -> UserRecord:
        now = datetime.now(tz=UTC)
        user = UserRecord(
            id=uuid4(),
            google_id=claims.subject,
            email=claims.email,
            name=claims.name,
            picture=claims.picture,
            created_at=now,
            last_login_at=now,
        )
        self.users[user.id] = user
        return user

    def record_login(self, user_id: UUID, claims: IdentityClaims) -> UserRecord:
        current = self.users[user_id]
        updated = UserRecord(
            id=current.id,
            google_id=current.google_id,
            email=claims.email,
            name=claims.name,
            picture=claims.picture,
            created_at=current.created_at,
            last_login_at=datetime.now(tz=UTC),
        )
        self.users[user_id] = updated
        self.logins.append(user_id)
        return updated


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)

    def create_session(
        self, session_id: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        session = SessionRecord(
            id=session_id,
            user_id=user_id,
            created_at=datetime.now(tz=UTC),
            expires_at=expires_at,
        )
        self.sessions[session_id] = session
        return session

    def get_session(self, session_id: str) -> SessionRecord | None:
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)


@dataclass
class InMemoryEntryRepository(EntryRepository, StatsRepository):
    """In-memory entry store that also answers stats queries."""

    entries: dict[UUID, CaffeineEntry] = field(default_factory=dict)

    def create_entry(self, entry: NewEntry) -> CaffeineEntry:
        stored = CaffeineEntry(
            id=uuid4(),
            drink_name=entry.drink_name,
            size_name=entry.size_name,
            full_name=entry.full_name,
            caffeine_mg=entry.caffeine_mg,
            custom_description=entry.custom_description,
            timestamp=entry.timestamp,
            is_custom_drink=entry.is_custom_drink,
            user_id=entry.user_id,
            user_name=entry.user_name,
            user_avatar=entry.user_avatar,
        )
        self.entries[stored.id] = stored
        return stored

    def get_entry(self, entry_id: UUID) -> CaffeineEntry | None:
        return self.entries.get(entry_id)

    def list_recent_entries(self, limit: int) -> list[CaffeineEntry]:
        return sorted(
            self.entries.values(), key=lambda entry: entry.timestamp, reverse=True
        )[:limit]

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def list_entry_rows(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[EntryRow]:
        rows = [
            EntryRow(
                timestamp=entry.timestamp,
                caffeine_mg=entry.caffeine_mg,
                user_id=entry.user_id,
                user_name=entry.user_name,
                user_avatar=entry.user_avatar,
            )
            for entry in self.list_recent_entries(len(self.entries))
        ]
        return [
            row
            for row in rows
            if (start is None or row.timestamp >= start)
            and (end is None or row.timestamp < end)
        ]


@dataclass
class InMemoryDrinkTypeRepository(DrinkTypeRepository):
    """In-memory drink catalog enforcing unique live names."""

    drink_types: dict[UUID, DrinkType] = field(default_factory=dict)

    def create_drink_type(
        self, name: str, image_url: str, sizes: list[SizeVariant]
    ) -> DrinkType:
        if self.find_by_name(name):
            raise DuplicateName("Drink type already exists")
        drink_type = DrinkType(
            id=uuid4(),
            name=name,
            image_url=image_url,
            sizes=tuple(sizes),
            deleted=False,
            created_at=datetime.now(tz=UTC),
        )
        self.drink_types[drink_type.id] = drink_type
        return drink_type

    def get_drink_type(self, drink_type_id: UUID) -> DrinkType | None:
        return self.drink_types.get(drink_type_id)

    def find_by_name(self, name: str) -> DrinkType | None:
        for drink_type in self.drink_types.values():
            if drink_type.name == name and not drink_type.deleted:
                return drink_type
        return None

    def list_drink_types(self) -> list[DrinkType]:
        live = [d for d in self.drink_types.values() if not d.deleted]
        return sorted(live, key=lambda drink_type: drink_type.name)

    def mark_deleted(self, drink_type_id: UUID) -> None:
        current = self.drink_types[drink_type_id]
        self.drink_types[drink_type_id] = DrinkType(
            id=current.id,
            name=current.name,
            image_url=current.image_url,
            sizes=current.sizes,
            deleted=True,
            created_at=current.created_at,
        )


@dataclass
class FakeTokenVerifier(TokenVerifier):
    """Token verifier that accepts a fixed set of tokens."""

    tokens: dict[str, IdentityClaims] = field(
        default_factory=lambda: {"alice-token": ALICE, "bob-token": BOB}
    )

    async def verify(self, token: str) -> IdentityClaims:
        claims = self.tokens.get(token)
        if claims is None:
            raise InvalidToken("Invalid token")
        return claims


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        google_client_id="client-id.apps.googleusercontent.com",
        session_secret="test-session-secret-with-32-bytes!",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def drink_type_repository() -> InMemoryDrinkTypeRepository:
    return InMemoryDrinkTypeRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    session_repository: InMemorySessionRepository,
    entry_repository: InMemoryEntryRepository,
    drink_type_repository: InMemoryDrinkTypeRepository,
) -> AppContainer:
    user_service = UserService(user_repository)
    session_service = SessionService(
        repository=session_repository,
        secret=settings.session_secret,
        ttl_hours=settings.session_ttl_hours,
    )
    auth_service = AuthService(
        verifier=FakeTokenVerifier(),
        user_service=user_service,
        session_service=session_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        auth_service=auth_service,
        drink_type_service=DrinkTypeService(drink_type_repository),
        entry_service=EntryService(entry_repository),
        stats_service=StatsService(entry_repository),
        close_resources=close_resources,
    )
