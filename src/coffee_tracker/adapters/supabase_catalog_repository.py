"""Supabase repository for the coffee catalog."""

from dataclasses import dataclass

from supabase import Client

from coffee_tracker.adapters.supabase_errors import execute_query
from coffee_tracker.domain.estimation import (
    EXTRA_LARGE,
    LARGE,
    MEDIUM,
    SMALL,
    CoffeeTypeRecord,
)
from coffee_tracker.services.estimation import CatalogRepository

_SIZE_COLUMNS = {
    SMALL: "caffeine_per_small",
    MEDIUM: "caffeine_per_medium",
    LARGE: "caffeine_per_large",
    EXTRA_LARGE: "caffeine_per_extra_large",
}


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Reads coffee_types and brewing_methods tables."""

    client: Client

    def list_coffee_types(self) -> list[CoffeeTypeRecord]:
        """Return active coffee types ordered by name."""
        response = execute_query(
            self.client.table("coffee_types")
            .select("name, " + ", ".join(_SIZE_COLUMNS.values()))
            .eq("is_active", True)
            .order("name", desc=False),
            "list coffee types",
        )
        return [
            CoffeeTypeRecord(
                name=str(row["name"]),
                caffeine={
                    size: int(row.get(column) or 0)
                    for size, column in _SIZE_COLUMNS.items()
                },
            )
            for row in response.data or []
        ]

    def list_brewing_methods(self) -> list[str]:
        """Return active brewing method names ordered by name."""
        response = execute_query(
            self.client.table("brewing_methods")
            .select("name")
            .eq("is_active", True)
            .order("name", desc=False),
            "list brewing methods",
        )
        return [str(row["name"]) for row in response.data or []]
