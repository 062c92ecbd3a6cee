"""Statistics service for caffeine entries."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from caffeine_counter.domain.errors import ValidationFailed
from caffeine_counter.domain.stats import (
    ChartSeries,
    EntryRow,
    LeaderboardRow,
    Period,
    TotalSummary,
)
from caffeine_counter.services.chart import add_months, build_chart, chart_window_start

LEADERBOARD_LIMIT = 50


class StatsRepository(Protocol):
    """Persistence interface for entry statistics."""

    def list_entry_rows(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[EntryRow]:
        """Return entries with start <= timestamp < end, newest first."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Service computing totals, leaderboards and charts."""

    repository: StatsRepository
    timezone_name: str = "UTC"
    leaderboard_periods: tuple[str, ...] = tuple(period.value for period in Period)
    clock: Callable[[], datetime] = field(default=_utc_now)

    def get_today_total(self) -> TotalSummary:
        """Return the total for the current local day."""
        tz = ZoneInfo(self.timezone_name)
        now = self.clock().astimezone(tz)
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        rows = self.repository.list_entry_rows(
            start.astimezone(UTC), end.astimezone(UTC)
        )
        return _summarize(rows)

    def get_all_time_total(self) -> TotalSummary:
        """Return the total over every entry."""
        return _summarize(self.repository.list_entry_rows())

    def get_leaderboard(self, raw_period: str | None) -> list[LeaderboardRow]:
        """Return users ranked by total caffeine within the period."""
        period = self.parse_period(raw_period, self.leaderboard_periods)
        start = _leaderboard_window_start(period, self.clock())
        rows = self.repository.list_entry_rows(start)
        return rank_users(rows)[:LEADERBOARD_LIMIT]

    def get_chart(self, raw_period: str | None) -> ChartSeries:
        """Return the bucketed chart for the period."""
        period = self.parse_period(raw_period, tuple(p.value for p in Period))
        tz = ZoneInfo(self.timezone_name)
        now = self.clock()
        start = chart_window_start(period, now, tz)
        rows = self.repository.list_entry_rows(
            start.astimezone(UTC) if start else None
        )
        return build_chart(period, now, rows, tz)

    @staticmethod
    def parse_period(raw: str | None, allowed: tuple[str, ...]) -> Period:
        """Parse a period name, rejecting names outside the allowed set."""
        value = (raw or "").strip().lower()
        if value not in allowed:
            raise ValidationFailed(
                f"Invalid period. Use one of: {', '.join(allowed)}"
            )
        return Period(value)


def rank_users(rows: list[EntryRow]) -> list[LeaderboardRow]:
    """Group rows by user and sort by total caffeine, highest first."""
    tallies: dict[str, _Tally] = {}
    for row in rows:
        if row.user_id is None:
            continue
        tally = tallies.get(row.user_id)
        if tally is None:
            tally = _Tally(user_name=row.user_name, user_avatar=row.user_avatar)
            tallies[row.user_id] = tally
        tally.total += row.caffeine_mg
        tally.count += 1

    ranked = [
        LeaderboardRow(
            user_id=user_id,
            user_name=tally.user_name,
            user_avatar=tally.user_avatar,
            total_caffeine=tally.total,
            entry_count=tally.count,
        )
        for user_id, tally in tallies.items()
    ]
    return sorted(ranked, key=lambda item: item.total_caffeine, reverse=True)


@dataclass
class _Tally:
    user_name: str
    user_avatar: str | None
    total: float = 0.0
    count: int = 0


def _leaderboard_window_start(period: Period, now: datetime) -> datetime | None:
    if period is Period.WEEK:
        return now - timedelta(days=7)
    if period is Period.MONTH:
        shifted = add_months(now.date(), -1)
        return datetime.combine(shifted, now.timetz())
    if period is Period.YEAR:
        shifted = add_months(now.date(), -12)
        return datetime.combine(shifted, now.timetz())
    return None


def _summarize(rows: list[EntryRow]) -> TotalSummary:
    return TotalSummary(total=sum(row.caffeine_mg for row in rows), count=len(rows))
