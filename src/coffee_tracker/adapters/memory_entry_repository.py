"""In-process entry and settings storage."""

from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from coffee_tracker.domain.entries import (
    CoffeeEntry,
    NewCoffeeEntry,
    sort_newest_first,
)
from coffee_tracker.domain.errors import EntryNotFoundError
from coffee_tracker.services.entries import EntryRepository, SettingRepository


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """Entry repository kept in process memory."""

    entries: dict[UUID, CoffeeEntry] = field(default_factory=dict)
    issued_ids: set[UUID] = field(default_factory=set)

    def list_entries(self) -> list[CoffeeEntry]:
        """Return all entries, newest first."""
        return sort_newest_first(list(self.entries.values()))

    def create_entry(self, entry: NewCoffeeEntry, caffeine: int) -> UUID:
        """Store an entry under an id that has never been issued."""
        entry_id = uuid4()
        while entry_id in self.issued_ids:
            entry_id = uuid4()
        self.issued_ids.add(entry_id)
        self.entries[entry_id] = CoffeeEntry(
            id=entry_id,
            date=entry.date,
            time=entry.time,
            type=entry.type,
            size=entry.size,
            brewing_method=entry.brewing_method,
            caffeine=caffeine,
            notes=entry.notes,
        )
        return entry_id

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> None:
        """Replace the supplied fields on a live entry."""
        current = self.entries.get(entry_id)
        if current is None:
            raise EntryNotFoundError(entry_id)
        self.entries[entry_id] = replace(current, **changes)

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry; the id stays retired."""
        self.entries.pop(entry_id, None)


@dataclass
class InMemorySettingRepository(SettingRepository):
    """Settings kept in process memory."""

    values: dict[str, str] = field(default_factory=dict)

    def get_setting(self, key: str) -> str | None:
        """Return a stored value."""
        return self.values.get(key)

    def set_setting(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        self.values[key] = value
