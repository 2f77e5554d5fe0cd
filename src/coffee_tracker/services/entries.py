"""Entry store interfaces and the entry logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from coffee_tracker.domain.entries import (
    UPDATABLE_FIELDS,
    CoffeeEntry,
    NewCoffeeEntry,
    distinct_dates,
    entries_on,
)
from coffee_tracker.services.estimation import EstimationService

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for coffee entries."""

    def list_entries(self) -> list[CoffeeEntry]:
        """Return all entries, newest first by date then time."""

    def create_entry(self, entry: NewCoffeeEntry, caffeine: int) -> UUID:
        """Store a new entry and return its freshly issued id."""

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> None:
        """Apply a partial update; raise EntryNotFoundError if the id is not live."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry; unknown ids are ignored."""


class SettingRepository(Protocol):
    """Persistence interface for key-value settings."""

    def get_setting(self, key: str) -> str | None:
        """Return a setting value, if present."""

    def set_setting(self, key: str, value: str) -> None:
        """Create or overwrite a setting."""


@dataclass
class EntryService:
    """Application service for logging and editing drinks."""

    repository: EntryRepository
    estimation_service: EstimationService

    def list_entries(self) -> list[CoffeeEntry]:
        """Return all entries, newest first."""
        return self.repository.list_entries()

    def entries_on(self, day: date) -> list[CoffeeEntry]:
        """Return the entries logged on a date."""
        return entries_on(self.repository.list_entries(), day)

    def list_dates(self) -> list[date]:
        """Return dates that have entries, most recent first."""
        return distinct_dates(self.repository.list_entries())

    def add_entry(self, entry: NewCoffeeEntry) -> CoffeeEntry:
        """Log a drink with caffeine estimated from its type and size."""
        caffeine = self.estimation_service.estimate(entry.type, entry.size)
        entry_id = self.repository.create_entry(entry, caffeine)
        _logger.info(
            "Logged entry %s: %s %s (%s mg)", entry_id, entry.size, entry.type, caffeine
        )
        return CoffeeEntry(
            id=entry_id,
            date=entry.date,
            time=entry.time,
            type=entry.type,
            size=entry.size,
            brewing_method=entry.brewing_method,
            caffeine=caffeine,
            notes=entry.notes,
        )

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> None:
        """Apply a partial update to an entry."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown entry fields: {', '.join(sorted(unknown))}")
        self.repository.update_entry(entry_id, changes)
        _logger.info("Updated entry %s: %s", entry_id, ", ".join(sorted(changes)))

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry if it exists."""
        self.repository.delete_entry(entry_id)
        _logger.info("Deleted entry %s", entry_id)
