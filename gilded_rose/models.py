"""
Data models for the Gilded Rose inventory.

An item's category is derived once from its name when the item is built;
the update rules never compare names again.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
MIN_QUALITY: int = 0
MAX_QUALITY: int = 50
LEGENDARY_QUALITY: int = 80                   # Sulfuras is stocked at 80

BACKSTAGE_DOUBLE_DAYS: int = 10               # +2 when sell_in <= 10
BACKSTAGE_TRIPLE_DAYS: int = 5                # +3 when sell_in <= 5


# ---------------------------------------------------------------------------
# Category names (exact, case-sensitive)
# ---------------------------------------------------------------------------
SULFURAS         = "Sulfuras, Hand of Ragnaros"
AGED_BRIE        = "Aged Brie"
BACKSTAGE_PASSES = "Backstage passes"
CONJURED         = "Conjured"                 # matched as a substring


class Category(Enum):
    """The closed set of item categories."""

    LEGENDARY        = "LEGENDARY"
    AGED_BRIE        = "AGED_BRIE"
    BACKSTAGE_PASSES = "BACKSTAGE_PASSES"
    CONJURED         = "CONJURED"
    REGULAR          = "REGULAR"


_EXACT_NAMES: Dict[str, Category] = {
    SULFURAS: Category.LEGENDARY,
    AGED_BRIE: Category.AGED_BRIE,
    BACKSTAGE_PASSES: Category.BACKSTAGE_PASSES,
}


def category_for(name: str) -> Category:
    """Map an item name to its category; unknown names are REGULAR."""
    category = _EXACT_NAMES.get(name)
    if category is not None:
        return category
    if CONJURED in name:
        return Category.CONJURED
    return Category.REGULAR


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Item:
    """A single stocked item.

    Values are taken as given; an out-of-range quality stays as supplied
    until the next update clamps it.
    """

    name:     str
    sell_in:  int
    quality:  int
    category: Category = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", category_for(self.name))

    @property
    def is_legendary(self) -> bool:
        return self.category is Category.LEGENDARY

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Item":
        return Item(
            name=d["name"],
            sell_in=int(d["sell_in"]),
            quality=int(d["quality"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sell_in": self.sell_in,
            "quality": self.quality,
            "category": self.category.value,
        }

    def with_values(self, sell_in: int, quality: int) -> "Item":
        """Return a copy carrying the new day's values."""
        return dataclasses.replace(self, sell_in=sell_in, quality=quality)
