"""Caffeine estimation backed by a remote catalog with a built-in fallback."""

import logging
from dataclasses import dataclass
from typing import Protocol

from coffee_tracker.domain.estimation import (
    DEFAULT_BREWING_METHODS,
    CoffeeCatalog,
    CoffeeTypeRecord,
    default_catalog,
    lookup_caffeine,
)
from coffee_tracker.services.cache import Cache

_CATALOG_CACHE_KEY = "catalog"

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Source of coffee types, brewing methods and caffeine content."""

    def list_coffee_types(self) -> list[CoffeeTypeRecord]:
        """Return active coffee types with caffeine per size."""

    def list_brewing_methods(self) -> list[str]:
        """Return active brewing method names."""


@dataclass
class EstimationService:
    """Service resolving the caffeine table used for new entries."""

    cache: Cache
    repository: CatalogRepository | None = None
    ttl_seconds: int = 3600

    def get_catalog(self) -> CoffeeCatalog:
        """Return the cached catalog, loading it on a miss."""
        cached = self.cache.get(_CATALOG_CACHE_KEY)
        if isinstance(cached, CoffeeCatalog):
            return cached
        catalog = self._load_catalog()
        # Fallbacks from a failed or empty remote load are not cached.
        if catalog.source == "remote" or self.repository is None:
            self.cache.set(_CATALOG_CACHE_KEY, catalog, ttl_seconds=self.ttl_seconds)
        return catalog

    def refresh(self) -> CoffeeCatalog:
        """Drop the cached catalog and load it again."""
        self.cache.delete(_CATALOG_CACHE_KEY)
        return self.get_catalog()

    def estimate(self, coffee_type: str, size: str) -> int:
        """Return estimated caffeine in mg, 0 for unknown combinations."""
        return lookup_caffeine(self.get_catalog().caffeine_table, coffee_type, size)

    def _load_catalog(self) -> CoffeeCatalog:
        fallback = default_catalog()
        if self.repository is None:
            return fallback

        try:
            coffee_types = self.repository.list_coffee_types()
        except Exception:
            _logger.warning(
                "Failed to load coffee types, using defaults", exc_info=True
            )
            return fallback
        if not coffee_types:
            _logger.warning("Catalog returned no coffee types, using defaults")
            return fallback

        try:
            brewing_methods = self.repository.list_brewing_methods()
        except Exception:
            _logger.warning(
                "Failed to load brewing methods, using defaults", exc_info=True
            )
            brewing_methods = []

        return CoffeeCatalog(
            coffee_types=[record.name for record in coffee_types],
            brewing_methods=brewing_methods or list(DEFAULT_BREWING_METHODS),
            caffeine_table={
                record.name: dict(record.caffeine) for record in coffee_types
            },
            source="remote",
        )
