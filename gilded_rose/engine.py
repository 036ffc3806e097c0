"""
The Gilded Rose update engine.

One call to ``age_item`` is one simulated day for one item:
  1. Quality changes according to the item's category, judged on the
     sell_in value *before* today's decrement, then is clamped.
  2. sell_in drops by one (legendary items keep theirs).

Aged Brie, Conjured and regular items share a single rule: a signed base
rate that doubles once the sell-by date has passed. Backstage passes and
the legendary item are handled as explicit special cases.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, MutableSequence, Optional, Sequence

from gilded_rose.models import (
    BACKSTAGE_DOUBLE_DAYS,
    BACKSTAGE_TRIPLE_DAYS,
    MAX_QUALITY,
    MIN_QUALITY,
    Category,
    Item,
)

if TYPE_CHECKING:
    from gilded_rose.store import Store

logger = logging.getLogger(__name__)


# Signed daily change before the sell-by date; doubled afterwards.
BASE_RATES: Dict[Category, int] = {
    Category.AGED_BRIE: +1,
    Category.CONJURED:  -2,
    Category.REGULAR:   -1,
}


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------
def _clamp(quality: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, quality))


def _deadline_passed(sell_in: int) -> bool:
    return sell_in <= 0


def _doubling_change(base_rate: int, sell_in: int) -> int:
    """Signed quality change, doubled once the sell-by date has passed."""
    if _deadline_passed(sell_in):
        return base_rate * 2
    return base_rate


def _backstage_quality(sell_in: int, quality: int) -> int:
    if _deadline_passed(sell_in):
        return 0
    if sell_in <= BACKSTAGE_TRIPLE_DAYS:
        return _clamp(quality + 3)
    if sell_in <= BACKSTAGE_DOUBLE_DAYS:
        return _clamp(quality + 2)
    return _clamp(quality + 1)


def age_item(item: Item) -> Item:
    """Return the item as it will be after one day."""
    if item.is_legendary:
        return item

    if item.category is Category.BACKSTAGE_PASSES:
        quality = _backstage_quality(item.sell_in, item.quality)
    else:
        change = _doubling_change(BASE_RATES[item.category], item.sell_in)
        quality = _clamp(item.quality + change)

    return item.with_values(sell_in=item.sell_in - 1, quality=quality)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class UpdateEngine:
    """
    Advances a collection of items by one day at a time.

    Usage:
        engine = UpdateEngine()
        engine.tick(items)   # every entry replaced by its aged value
    """

    def __init__(self) -> None:
        self.tick_count: int = 0

    def tick(self, items: MutableSequence[Item]) -> None:
        """Age every item in place; order and length are preserved."""
        self.tick_count += 1
        for index, item in enumerate(items):
            aged = age_item(item)
            items[index] = aged
            logger.debug(
                "Tick #%d: %r sell_in %d→%d quality %d→%d",
                self.tick_count, item.name,
                item.sell_in, aged.sell_in, item.quality, aged.quality,
            )


# ---------------------------------------------------------------------------
# Simulation
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class DayReport:
    """Snapshot of the whole inventory at the end of one day."""

    day: int
    items: List[Item] = field(default_factory=list)
    inventory_hash: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "day": self.day,
            "items": [item.to_dict() for item in self.items],
            "inventory_hash": self.inventory_hash,
        }


def run_simulation(
    items: Sequence[Item],
    days: int,
    store: Optional[Store] = None,
) -> List[DayReport]:
    """
    Stock the items and advance ``days`` days.
    Returns one report per day, starting with day 0 (the stocked state).
    """
    from gilded_rose.store import Store, Warehouse, inventory_hash

    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    if store is None:
        store = Store(Warehouse())

    for item in items:
        store.add(item)

    logger.info("Simulating %d days over %d items", days, store.count())

    reports: List[DayReport] = []
    for day in range(days + 1):
        if day > 0:
            store.tick_all()
        snapshot = list(store.items())
        reports.append(DayReport(day, snapshot, inventory_hash(snapshot)))

    logger.info(
        "Simulation finished after %d days (hash=%s)",
        days, reports[-1].inventory_hash,
    )
    return reports
