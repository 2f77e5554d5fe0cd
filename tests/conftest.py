"""Shared test fixtures."""

from datetime import date, time
from uuid import uuid4

import pytest

from coffee_tracker.adapters.memory_entry_repository import (
    InMemoryEntryRepository,
    InMemorySettingRepository,
)
from coffee_tracker.config import Settings
from coffee_tracker.containers import AppContainer, assemble_container
from coffee_tracker.domain.entries import CoffeeEntry
from coffee_tracker.services.cache import InMemoryCache
from coffee_tracker.services.estimation import EstimationService


def make_entry(  # noqa: PLR0913
    day: date,
    coffee_type: str = "Latte",
    size: str = "Medium",
    caffeine: int = 128,
    at: time = time(8, 0),
    brewing_method: str = "Espresso Machine",
    notes: str | None = None,
) -> CoffeeEntry:
    """Build an entry with a random id for aggregation tests."""
    return CoffeeEntry(
        id=uuid4(),
        date=day,
        time=at,
        type=coffee_type,
        size=size,
        brewing_method=brewing_method,
        caffeine=caffeine,
        notes=notes,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        store_backend="memory",
        default_passcode="coffee123",
        daily_caffeine_limit_mg=400,
        timezone="UTC",
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def setting_repository() -> InMemorySettingRepository:
    return InMemorySettingRepository()


@pytest.fixture
def estimation_service() -> EstimationService:
    return EstimationService(cache=InMemoryCache())


@pytest.fixture
def container(
    settings: Settings,
    entry_repository: InMemoryEntryRepository,
    setting_repository: InMemorySettingRepository,
) -> AppContainer:
    return assemble_container(
        settings,
        entry_repository=entry_repository,
        setting_repository=setting_repository,
    )
