"""Supabase repository for coffee entries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from uuid import UUID

from supabase import Client

from coffee_tracker.adapters.supabase_errors import execute_query
from coffee_tracker.domain.entries import CoffeeEntry, NewCoffeeEntry
from coffee_tracker.domain.errors import EntryNotFoundError, StoreUnavailableError
from coffee_tracker.services.entries import EntryRepository

_ENTRY_COLUMNS = "id, date, time, type, size, brewing_method, caffeine, notes"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for the coffee_entries table."""

    client: Client

    def list_entries(self) -> list[CoffeeEntry]:
        """Return all entries, newest first."""
        response = execute_query(
            self.client.table("coffee_entries")
            .select(_ENTRY_COLUMNS)
            .order("date", desc=True)
            .order("time", desc=True),
            "list entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, entry: NewCoffeeEntry, caffeine: int) -> UUID:
        """Insert an entry and return the database-generated id."""
        response = execute_query(
            self.client.table("coffee_entries").insert(
                {
                    "date": entry.date.isoformat(),
                    "time": _format_time(entry.time),
                    "type": entry.type,
                    "size": entry.size,
                    "brewing_method": entry.brewing_method,
                    "caffeine": caffeine,
                    "notes": entry.notes,
                }
            ),
            "create entry",
        )
        if not response.data:
            raise StoreUnavailableError("Failed to create coffee entry")
        return UUID(response.data[0]["id"])

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> None:
        """Update the supplied columns of an entry."""
        if not changes:
            response = execute_query(
                self.client.table("coffee_entries")
                .select("id")
                .eq("id", str(entry_id))
                .limit(1),
                "get entry",
            )
        else:
            payload = _to_row(changes)
            payload["updated_at"] = datetime.now(tz=UTC).isoformat()
            response = execute_query(
                self.client.table("coffee_entries")
                .update(payload)
                .eq("id", str(entry_id)),
                "update entry",
            )
        if not response.data:
            raise EntryNotFoundError(entry_id)

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry by id."""
        execute_query(
            self.client.table("coffee_entries").delete().eq("id", str(entry_id)),
            "delete entry",
        )


def _to_row(changes: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for name, value in changes.items():
        if isinstance(value, date):
            row[name] = value.isoformat()
        elif isinstance(value, time):
            row[name] = _format_time(value)
        else:
            row[name] = value
    return row


def _format_time(value: time) -> str:
    return value.strftime("%H:%M")


def _parse_entry(row: dict[str, object]) -> CoffeeEntry:
    raw_time = str(row.get("time", "00:00"))
    return CoffeeEntry(
        id=UUID(str(row["id"])),
        date=date.fromisoformat(str(row["date"])),
        time=time.fromisoformat(raw_time[:5]),
        type=str(row.get("type", "")),
        size=str(row.get("size", "")),
        brewing_method=str(row.get("brewing_method", "")),
        caffeine=int(row.get("caffeine") or 0),
        notes=row.get("notes"),
    )
