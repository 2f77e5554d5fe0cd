"""Domain models for logged coffee entries."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID

UPDATABLE_FIELDS = frozenset(
    {"date", "time", "type", "size", "brewing_method", "caffeine", "notes"}
)


@dataclass(frozen=True)
class NewCoffeeEntry:
    """A drink to be logged, before the store assigns an id."""

    date: date
    time: time
    type: str
    size: str
    brewing_method: str
    notes: str | None = None


@dataclass(frozen=True)
class CoffeeEntry:
    """A single logged coffee-drinking event."""

    id: UUID
    date: date
    time: time
    type: str
    size: str
    brewing_method: str
    caffeine: int
    notes: str | None = None


def sort_newest_first(entries: list[CoffeeEntry]) -> list[CoffeeEntry]:
    """Return entries ordered by date then time, most recent first."""
    return sorted(entries, key=lambda entry: (entry.date, entry.time), reverse=True)


def entries_on(entries: list[CoffeeEntry], day: date) -> list[CoffeeEntry]:
    """Return the entries logged on ``day``."""
    return [entry for entry in entries if entry.date == day]


def distinct_dates(entries: list[CoffeeEntry]) -> list[date]:
    """Return every date with at least one entry, most recent first."""
    return sorted({entry.date for entry in entries}, reverse=True)
