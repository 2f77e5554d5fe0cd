"""Tests for entry logging and the in-memory store."""

from datetime import date, time
from uuid import uuid4

import pytest

from coffee_tracker.adapters.memory_entry_repository import InMemoryEntryRepository
from coffee_tracker.domain.entries import NewCoffeeEntry
from coffee_tracker.domain.errors import EntryNotFoundError
from coffee_tracker.services.entries import EntryService
from coffee_tracker.services.estimation import EstimationService


def _new_entry(
    day: date = date(2024, 1, 5),
    at: time = time(9, 0),
    coffee_type: str = "Latte",
    size: str = "Medium",
) -> NewCoffeeEntry:
    return NewCoffeeEntry(
        date=day,
        time=at,
        type=coffee_type,
        size=size,
        brewing_method="Espresso Machine",
        notes="oat milk",
    )


@pytest.fixture
def service(
    entry_repository: InMemoryEntryRepository,
    estimation_service: EstimationService,
) -> EntryService:
    return EntryService(entry_repository, estimation_service)


def test_add_entry_estimates_caffeine(service: EntryService) -> None:
    created = service.add_entry(_new_entry(coffee_type="Espresso", size="Small"))

    assert created.caffeine == 63
    assert service.list_entries() == [created]


def test_add_entry_with_unknown_type_stores_zero(service: EntryService) -> None:
    created = service.add_entry(_new_entry(coffee_type="Cortado"))

    assert created.caffeine == 0


def test_list_entries_newest_first(service: EntryService) -> None:
    service.add_entry(_new_entry(day=date(2024, 1, 4), at=time(18, 0)))
    service.add_entry(_new_entry(day=date(2024, 1, 5), at=time(7, 0)))
    service.add_entry(_new_entry(day=date(2024, 1, 5), at=time(15, 30)))

    ordered = [(entry.date, entry.time) for entry in service.list_entries()]

    assert ordered == [
        (date(2024, 1, 5), time(15, 30)),
        (date(2024, 1, 5), time(7, 0)),
        (date(2024, 1, 4), time(18, 0)),
    ]


def test_ids_are_never_reused(service: EntryService) -> None:
    seen = set()
    for _ in range(3):
        created = service.add_entry(_new_entry())
        assert created.id not in seen
        seen.add(created.id)
        service.delete_entry(created.id)
        assert all(entry.id != created.id for entry in service.list_entries())

    assert service.list_entries() == []


def test_delete_unknown_entry_is_noop(service: EntryService) -> None:
    kept = service.add_entry(_new_entry())

    service.delete_entry(uuid4())

    assert service.list_entries() == [kept]


def test_update_entry_touches_only_supplied_fields(service: EntryService) -> None:
    created = service.add_entry(_new_entry())

    service.update_entry(created.id, {"size": "Large", "notes": None})

    updated = service.list_entries()[0]
    assert updated.size == "Large"
    assert updated.notes is None
    assert updated.type == created.type
    assert updated.caffeine == created.caffeine


def test_update_missing_entry_leaves_store_unchanged(service: EntryService) -> None:
    created = service.add_entry(_new_entry())
    before = service.list_entries()

    with pytest.raises(EntryNotFoundError):
        service.update_entry(uuid4(), {"caffeine": 10})

    assert service.list_entries() == before
    assert before == [created]


def test_update_rejects_unknown_fields(service: EntryService) -> None:
    created = service.add_entry(_new_entry())

    with pytest.raises(ValueError, match="id"):
        service.update_entry(created.id, {"id": uuid4()})


def test_caffeine_is_not_recomputed_when_table_changes(
    service: EntryService, estimation_service: EstimationService
) -> None:
    created = service.add_entry(_new_entry())
    estimation_service.get_catalog().caffeine_table["Latte"]["Medium"] = 1

    assert service.list_entries()[0].caffeine == created.caffeine == 128


def test_entries_on_and_dates(service: EntryService) -> None:
    service.add_entry(_new_entry(day=date(2024, 1, 3)))
    service.add_entry(_new_entry(day=date(2024, 1, 5)))
    service.add_entry(_new_entry(day=date(2024, 1, 5)))

    assert len(service.entries_on(date(2024, 1, 5))) == 2
    assert service.entries_on(date(2024, 1, 4)) == []
    assert service.list_dates() == [date(2024, 1, 5), date(2024, 1, 3)]
