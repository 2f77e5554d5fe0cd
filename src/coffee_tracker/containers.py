"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from coffee_tracker.adapters.memory_entry_repository import (
    InMemoryEntryRepository,
    InMemorySettingRepository,
)
from coffee_tracker.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from coffee_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from coffee_tracker.adapters.supabase_setting_repository import (
    SupabaseSettingRepository,
)
from coffee_tracker.config import STORE_BACKENDS, Settings
from coffee_tracker.services.cache import InMemoryCache
from coffee_tracker.services.entries import (
    EntryRepository,
    EntryService,
    SettingRepository,
)
from coffee_tracker.services.estimation import CatalogRepository, EstimationService
from coffee_tracker.services.passcode import PasscodeService
from coffee_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    estimation_service: EstimationService
    stats_service: StatsService
    passcode_service: PasscodeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.store_backend not in STORE_BACKENDS:
        raise ValueError(f"Unknown store backend: {resolved_settings.store_backend}")

    entry_repository: EntryRepository
    setting_repository: SettingRepository
    catalog_repository: CatalogRepository | None = None
    if resolved_settings.store_backend == "supabase":
        if not resolved_settings.supabase_url or not resolved_settings.supabase_key:
            raise ValueError("Supabase backend requires SUPABASE_URL and SUPABASE_KEY")
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_key
        )
        entry_repository = SupabaseEntryRepository(supabase_client)
        setting_repository = SupabaseSettingRepository(supabase_client)
        catalog_repository = SupabaseCatalogRepository(supabase_client)
    else:
        entry_repository = InMemoryEntryRepository()
        setting_repository = InMemorySettingRepository()

    return assemble_container(
        resolved_settings,
        entry_repository=entry_repository,
        setting_repository=setting_repository,
        catalog_repository=catalog_repository,
    )


def assemble_container(
    settings: Settings,
    *,
    entry_repository: EntryRepository,
    setting_repository: SettingRepository,
    catalog_repository: CatalogRepository | None = None,
) -> AppContainer:
    """Wire services around already-built repositories."""
    estimation_service = EstimationService(
        cache=InMemoryCache(),
        repository=catalog_repository,
        ttl_seconds=settings.catalog_ttl_seconds,
    )
    entry_service = EntryService(
        repository=entry_repository,
        estimation_service=estimation_service,
    )
    stats_service = StatsService(
        repository=entry_repository,
        timezone_name=settings.timezone,
        daily_limit_mg=settings.daily_caffeine_limit_mg,
    )
    passcode_service = PasscodeService(
        repository=setting_repository,
        default_passcode=settings.default_passcode,
    )

    return AppContainer(
        settings=settings,
        entry_service=entry_service,
        estimation_service=estimation_service,
        stats_service=stats_service,
        passcode_service=passcode_service,
    )
