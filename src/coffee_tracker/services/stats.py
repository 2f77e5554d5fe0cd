"""Statistics over logged coffee entries."""

import calendar
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from coffee_tracker.domain.entries import CoffeeEntry, entries_on
from coffee_tracker.domain.stats import (
    DailyRollup,
    MonthlyRollup,
    TodaySummary,
    TypeShare,
    WeekSummary,
)
from coffee_tracker.services.entries import EntryRepository

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


@dataclass
class StatsService:
    """Service for computing rollups in the configured timezone."""

    repository: EntryRepository
    timezone_name: str = "UTC"
    daily_limit_mg: int = 400

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def get_today(self) -> TodaySummary:
        """Return today's totals."""
        entries = self.repository.list_entries()
        return today_summary(entries, self.today(), self.daily_limit_mg)

    def get_week(self, week_offset: int = 0) -> WeekSummary:
        """Return the Sunday-aligned week ``week_offset`` weeks from now."""
        entries = self.repository.list_entries()
        days = weekly_rollup(entries, week_offset, self.today())
        total_count = sum(day.count for day in days)
        return WeekSummary(
            week_offset=week_offset,
            days=days,
            total_count=total_count,
            total_caffeine=sum(day.total_caffeine for day in days),
            avg_per_day=total_count / DAYS_PER_WEEK,
        )

    def get_month(self, month_offset: int = 0) -> MonthlyRollup:
        """Return the calendar month ``month_offset`` months from now."""
        entries = self.repository.list_entries()
        return monthly_rollup(entries, month_offset, self.today())


def daily_rollup(entries: list[CoffeeEntry], day: date) -> DailyRollup:
    """Count entries and sum caffeine for a single date."""
    matching = entries_on(entries, day)
    return DailyRollup(
        day=day,
        count=len(matching),
        total_caffeine=sum(entry.caffeine for entry in matching),
    )


def week_start(today: date, week_offset: int) -> date:
    """Return the Sunday that opens the week ``week_offset`` weeks from today."""
    # date.weekday() is 0 for Monday, so Sunday maps to 0 days back.
    days_since_sunday = (today.weekday() + 1) % DAYS_PER_WEEK
    sunday = today - timedelta(days=days_since_sunday)
    return sunday + timedelta(days=week_offset * DAYS_PER_WEEK)


def weekly_rollup(
    entries: list[CoffeeEntry], week_offset: int, today: date
) -> list[DailyRollup]:
    """Return seven daily rollups in ascending order."""
    start = week_start(today, week_offset)
    return [
        daily_rollup(entries, start + timedelta(days=offset))
        for offset in range(DAYS_PER_WEEK)
    ]


def shift_month(today: date, month_offset: int) -> tuple[int, int]:
    """Return (year, month) ``month_offset`` months away from today's month."""
    index = today.year * MONTHS_PER_YEAR + (today.month - 1) + month_offset
    year, month_index = divmod(index, MONTHS_PER_YEAR)
    return year, month_index + 1


def monthly_rollup(
    entries: list[CoffeeEntry], month_offset: int, today: date
) -> MonthlyRollup:
    """Aggregate a calendar month.

    The daily sequence stops at ``today`` for the month that contains it, and
    covers the whole month otherwise.
    """
    year, month = shift_month(today, month_offset)
    days_in_month = calendar.monthrange(year, month)[1]
    monthly_entries = [
        entry
        for entry in entries
        if entry.date.year == year and entry.date.month == month
    ]
    total_count = len(monthly_entries)

    last_day = days_in_month
    if (year, month) == (today.year, today.month):
        last_day = today.day
    daily = [
        daily_rollup(monthly_entries, date(year, month, day))
        for day in range(1, last_day + 1)
    ]

    return MonthlyRollup(
        year=year,
        month=month,
        total_count=total_count,
        total_caffeine=sum(entry.caffeine for entry in monthly_entries),
        avg_per_day=total_count / days_in_month,
        type_distribution=type_distribution(monthly_entries),
        daily=daily,
    )


def type_distribution(entries: list[CoffeeEntry]) -> list[TypeShare]:
    """Return per-type counts and percentages, most frequent first."""
    counts = Counter(entry.type for entry in entries)
    total = len(entries)
    shares = [
        TypeShare(
            type=coffee_type,
            count=count,
            percentage=(count / total * 100) if total else 0.0,
        )
        for coffee_type, count in counts.items()
    ]
    return sorted(shares, key=lambda share: (-share.count, share.type))


def today_summary(
    entries: list[CoffeeEntry], today: date, daily_limit_mg: int
) -> TodaySummary:
    """Summarize today's drinks against the daily caffeine limit.

    ``total_entries`` counts every logged entry, not just today's.
    """
    rollup = daily_rollup(entries, today)
    shares = type_distribution(entries_on(entries, today))
    percentage = 0.0
    if daily_limit_mg > 0:
        percentage = min(rollup.total_caffeine / daily_limit_mg * 100, 100.0)
    return TodaySummary(
        day=today,
        count=rollup.count,
        total_caffeine=rollup.total_caffeine,
        most_common_type=shares[0].type if shares else None,
        limit_mg=daily_limit_mg,
        limit_percentage=percentage,
        total_entries=len(entries),
    )
