"""
Inventories for simulations and golden-master runs.

``sample_inventory`` is the shop's usual stock. ``generate_items`` builds a
random but seed-reproducible stock covering every category, including
out-of-range values that the first update has to clamp.
"""
from __future__ import annotations

import random
from typing import List

from gilded_rose.models import (
    AGED_BRIE,
    BACKSTAGE_PASSES,
    LEGENDARY_QUALITY,
    MAX_QUALITY,
    SULFURAS,
    Item,
)


REGULAR_NAMES = [
    "+5 Dexterity Vest",
    "Elixir of the Mongoose",
    "Iron Ration",
    "Potion of Healing",
]

CONJURED_NAMES = [
    "Conjured Mana Cake",
    "Conjured Sword",
]


def sample_inventory() -> List[Item]:
    """The shop's usual stock, one or more of each category."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE, 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item(SULFURAS, 0, LEGENDARY_QUALITY),
        Item(SULFURAS, -1, LEGENDARY_QUALITY),
        Item(BACKSTAGE_PASSES, 15, 20),
        Item(BACKSTAGE_PASSES, 10, 49),
        Item(BACKSTAGE_PASSES, 5, 49),
        Item("Conjured Mana Cake", 3, 6),
    ]


def generate_items(count: int, seed: int = 42) -> List[Item]:
    """Generate ``count`` items; the same seed always gives the same list."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = random.Random(seed)
    names = (
        REGULAR_NAMES
        + CONJURED_NAMES
        + [AGED_BRIE, BACKSTAGE_PASSES, SULFURAS]
    )

    items: List[Item] = []
    for _ in range(count):
        name = rng.choice(names)
        sell_in = rng.randint(-5, 20)
        if name == SULFURAS:
            quality = LEGENDARY_QUALITY
        elif rng.random() < 0.1:
            # Out of range on purpose; the next update clamps it
            quality = rng.choice([-3, MAX_QUALITY + rng.randint(1, 30)])
        else:
            quality = rng.randint(0, MAX_QUALITY)
        items.append(Item(name, sell_in, quality))

    return items
