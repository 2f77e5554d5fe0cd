"""JSON shapes returned by the API."""

from coffee_tracker.domain.entries import CoffeeEntry
from coffee_tracker.domain.estimation import CoffeeCatalog
from coffee_tracker.domain.stats import (
    DailyRollup,
    MonthlyRollup,
    TodaySummary,
    WeekSummary,
)


def serialize_entry(entry: CoffeeEntry) -> dict[str, object]:
    """Return an entry with its wire field names."""
    return {
        "id": str(entry.id),
        "date": entry.date.isoformat(),
        "time": entry.time.strftime("%H:%M"),
        "type": entry.type,
        "size": entry.size,
        "brewingMethod": entry.brewing_method,
        "caffeine": entry.caffeine,
        "notes": entry.notes,
    }


def serialize_catalog(catalog: CoffeeCatalog) -> dict[str, object]:
    """Return the catalog labels and caffeine table."""
    return {
        "types": catalog.coffee_types,
        "sizes": catalog.sizes,
        "brewingMethods": catalog.brewing_methods,
        "caffeine": catalog.caffeine_table,
        "source": catalog.source,
    }


def serialize_day(rollup: DailyRollup) -> dict[str, object]:
    """Return one day of a rollup."""
    return {
        "date": rollup.day.isoformat(),
        "count": rollup.count,
        "totalCaffeine": rollup.total_caffeine,
    }


def serialize_today(summary: TodaySummary) -> dict[str, object]:
    """Return today's totals and limit progress."""
    return {
        "date": summary.day.isoformat(),
        "count": summary.count,
        "totalCaffeine": summary.total_caffeine,
        "mostCommonType": summary.most_common_type,
        "limitMg": summary.limit_mg,
        "limitPercentage": round(summary.limit_percentage, 1),
        "totalEntries": summary.total_entries,
    }


def serialize_week(summary: WeekSummary) -> dict[str, object]:
    """Return a week rollup with its totals."""
    return {
        "offset": summary.week_offset,
        "days": [serialize_day(day) for day in summary.days],
        "totalCount": summary.total_count,
        "totalCaffeine": summary.total_caffeine,
        "avgPerDay": round(summary.avg_per_day, 1),
    }


def serialize_month(rollup: MonthlyRollup) -> dict[str, object]:
    """Return a month rollup with its type distribution."""
    return {
        "year": rollup.year,
        "month": rollup.month,
        "totalCount": rollup.total_count,
        "totalCaffeine": rollup.total_caffeine,
        "avgPerDay": round(rollup.avg_per_day, 1),
        "typeDistribution": [
            {
                "type": share.type,
                "count": share.count,
                "percentage": round(share.percentage, 1),
            }
            for share in rollup.type_distribution
        ],
        "daily": [serialize_day(day) for day in rollup.daily],
    }
