"""Caffeine reference data and lookups."""

from dataclasses import dataclass, field

SMALL = "Small"
MEDIUM = "Medium"
LARGE = "Large"
EXTRA_LARGE = "Extra Large"

COFFEE_SIZES: tuple[str, ...] = (SMALL, MEDIUM, LARGE, EXTRA_LARGE)

DEFAULT_COFFEE_TYPES: tuple[str, ...] = (
    "Espresso",
    "Americano",
    "Latte",
    "Cappuccino",
    "Macchiato",
    "Mocha",
    "Cold Brew",
    "Drip Coffee",
)

DEFAULT_BREWING_METHODS: tuple[str, ...] = (
    "Espresso Machine",
    "French Press",
    "Pour Over",
    "Cold Brew",
    "Drip",
    "Aeropress",
)

CaffeineTable = dict[str, dict[str, int]]

DEFAULT_CAFFEINE_TABLE: CaffeineTable = {
    "Espresso": {SMALL: 63, MEDIUM: 94, LARGE: 125, EXTRA_LARGE: 156},
    "Americano": {SMALL: 77, MEDIUM: 154, LARGE: 231, EXTRA_LARGE: 308},
    "Latte": {SMALL: 64, MEDIUM: 128, LARGE: 192, EXTRA_LARGE: 256},
    "Cappuccino": {SMALL: 64, MEDIUM: 128, LARGE: 192, EXTRA_LARGE: 256},
    "Macchiato": {SMALL: 64, MEDIUM: 128, LARGE: 192, EXTRA_LARGE: 256},
    "Mocha": {SMALL: 95, MEDIUM: 175, LARGE: 255, EXTRA_LARGE: 335},
    "Cold Brew": {SMALL: 103, MEDIUM: 205, LARGE: 308, EXTRA_LARGE: 410},
    "Drip Coffee": {SMALL: 95, MEDIUM: 190, LARGE: 285, EXTRA_LARGE: 380},
}


@dataclass(frozen=True)
class CoffeeTypeRecord:
    """A coffee type with its caffeine content per cup size."""

    name: str
    caffeine: dict[str, int]


@dataclass(frozen=True)
class CoffeeCatalog:
    """Valid labels and the caffeine table used for new entries."""

    coffee_types: list[str]
    brewing_methods: list[str]
    caffeine_table: CaffeineTable
    sizes: list[str] = field(default_factory=lambda: list(COFFEE_SIZES))
    source: str = "default"


def default_catalog() -> CoffeeCatalog:
    """Return the built-in catalog."""
    return CoffeeCatalog(
        coffee_types=list(DEFAULT_COFFEE_TYPES),
        brewing_methods=list(DEFAULT_BREWING_METHODS),
        caffeine_table={
            name: dict(sizes) for name, sizes in DEFAULT_CAFFEINE_TABLE.items()
        },
    )


def lookup_caffeine(table: CaffeineTable, coffee_type: str, size: str) -> int:
    """Return milligrams of caffeine for a type and size, or 0 when unknown."""
    return table.get(coffee_type, {}).get(size, 0)
