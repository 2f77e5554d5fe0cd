"""Domain models for consumption statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyRollup:
    """Entry count and caffeine total for one calendar day."""

    day: date
    count: int
    total_caffeine: int


@dataclass(frozen=True)
class TypeShare:
    """How often a coffee type appears within a period."""

    type: str
    count: int
    percentage: float


@dataclass(frozen=True)
class WeekSummary:
    """Seven-day rollup starting on a Sunday."""

    week_offset: int
    days: list[DailyRollup]
    total_count: int
    total_caffeine: int
    avg_per_day: float


@dataclass(frozen=True)
class MonthlyRollup:
    """Calendar month rollup."""

    year: int
    month: int
    total_count: int
    total_caffeine: int
    avg_per_day: float
    type_distribution: list[TypeShare]
    daily: list[DailyRollup]


@dataclass(frozen=True)
class TodaySummary:
    """Totals for the current day against the daily caffeine limit."""

    day: date
    count: int
    total_caffeine: int
    most_common_type: str | None
    limit_mg: int
    limit_percentage: float
    total_entries: int
