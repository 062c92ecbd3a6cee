"""Domain models for statistics."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Period(str, Enum):
    """Named relative time windows."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


@dataclass(frozen=True)
class EntryRow:
    """The slice of an entry that statistics need."""

    timestamp: datetime
    caffeine_mg: float
    user_id: str | None = None
    user_name: str = ""
    user_avatar: str | None = None


@dataclass(frozen=True)
class TotalSummary:
    """Summed caffeine and number of entries."""

    total: float
    count: int


@dataclass(frozen=True)
class LeaderboardRow:
    """Aggregated intake for one user."""

    user_id: str
    user_name: str
    user_avatar: str | None
    total_caffeine: float
    entry_count: int


@dataclass(frozen=True)
class ChartSeries:
    """Labels and values of a bucketed chart, always of equal length."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
