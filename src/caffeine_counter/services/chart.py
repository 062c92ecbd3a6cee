"""Time-bucketed caffeine chart.

The chart axis is built from local calendar dates rather than instants, so a
daily axis advances exactly one calendar day even across DST changes, a
monthly axis always lands on the first of the month and a yearly axis on
January 1st. Every step between the start and the end bucket is emitted, with
zero for buckets that have no entries.
"""

from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo

from caffeine_counter.domain.stats import ChartSeries, EntryRow, Period

DAILY_SPAN_LIMIT_DAYS = 90
MONTHLY_SPAN_LIMIT_DAYS = 540
MONTHS_PER_YEAR = 12

_MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class Step(str, Enum):
    """Bucket width of a chart axis."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


def build_chart(
    period: Period, now: datetime, entries: Iterable[EntryRow], tz: ZoneInfo
) -> ChartSeries:
    """Bucket entries for the period and return gap-free labels and values."""
    now = _as_aware(now)
    today = now.astimezone(tz).date()
    rows = [row for row in entries if _as_aware(row.timestamp) <= now]

    if period is Period.ALL:
        if not rows:
            return ChartSeries()
        days = [_local_date(row.timestamp, tz) for row in rows]
        step, start = _all_time_axis(min(days), max(days))
        end = max(days)
    else:
        step, start = _relative_axis(period, today)
        end = today

    totals: dict[str, float] = {}
    for row in rows:
        day = _local_date(row.timestamp, tz)
        if day < start:
            continue
        key = bucket_key(day, step)
        totals[key] = totals.get(key, 0) + row.caffeine_mg

    series = ChartSeries()
    cursor = start
    last = align(end, step)
    while cursor <= last:
        series.labels.append(bucket_label(cursor, step))
        series.values.append(totals.get(bucket_key(cursor, step), 0))
        cursor = advance(cursor, step)
    return series


def chart_window_start(period: Period, now: datetime, tz: ZoneInfo) -> datetime | None:
    """Return the first instant a chart for the period can include."""
    if period is Period.ALL:
        return None
    _, start = _relative_axis(period, _as_aware(now).astimezone(tz).date())
    return datetime(start.year, start.month, start.day, tzinfo=tz)


def bucket_key(day: date, step: Step) -> str:
    """Return the grouping key of the bucket containing the day."""
    if step is Step.DAY:
        return day.isoformat()
    if step is Step.MONTH:
        return f"{day.year:04d}-{day.month:02d}"
    return f"{day.year:04d}"


def bucket_label(day: date, step: Step) -> str:
    """Return the display label of the bucket starting on the day."""
    if step is Step.DAY:
        return f"{_MONTH_ABBR[day.month - 1]} {day.day}"
    if step is Step.MONTH:
        return f"{_MONTH_ABBR[day.month - 1]} {day.year}"
    return str(day.year)


def align(day: date, step: Step) -> date:
    """Truncate a date to the start of its bucket."""
    if step is Step.MONTH:
        return day.replace(day=1)
    if step is Step.YEAR:
        return date(day.year, 1, 1)
    return day


def advance(day: date, step: Step) -> date:
    """Move an aligned date forward by one bucket."""
    if step is Step.DAY:
        return day + timedelta(days=1)
    if step is Step.MONTH:
        return add_months(day, 1)
    return date(day.year + 1, 1, 1)


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the target month's last day."""
    index = day.year * MONTHS_PER_YEAR + (day.month - 1) + months
    year, month = divmod(index, MONTHS_PER_YEAR)
    month += 1
    if month == MONTHS_PER_YEAR:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    last_day = (next_month - timedelta(days=1)).day
    return date(year, month, min(day.day, last_day))


def _relative_axis(period: Period, today: date) -> tuple[Step, date]:
    if period is Period.WEEK:
        return Step.DAY, today - timedelta(days=6)
    if period is Period.MONTH:
        return Step.DAY, today - timedelta(days=29)
    if period is Period.YEAR:
        return Step.MONTH, add_months(today.replace(day=1), -MONTHS_PER_YEAR)
    raise ValueError(f"No relative axis for period {period.value}")


def _all_time_axis(first: date, last: date) -> tuple[Step, date]:
    span_days = (last - first).days + 1
    if span_days <= DAILY_SPAN_LIMIT_DAYS:
        return Step.DAY, first
    if span_days <= MONTHLY_SPAN_LIMIT_DAYS:
        return Step.MONTH, align(first, Step.MONTH)
    return Step.YEAR, align(first, Step.YEAR)


def _local_date(moment: datetime, tz: ZoneInfo) -> date:
    return _as_aware(moment).astimezone(tz).date()


def _as_aware(moment: datetime) -> datetime:
    """Treat naive datetimes from the store as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment
