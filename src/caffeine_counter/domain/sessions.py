"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted login session."""

    id: str
    user_id: UUID
    created_at: datetime
    expires_at: datetime
