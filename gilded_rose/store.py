"""
The shop's in-memory warehouse.

There is exactly one process-wide warehouse, ``WAREHOUSE``. It starts empty
when this module is imported and is emptied again by ``clear()``. Every
``Store`` built without an explicit warehouse works on that same shared
collection, so a second ``Store()`` sees everything the first one added.

Nothing here is thread-safe: callers must not add items while a day is
being advanced on the same warehouse.
"""
from __future__ import annotations

import hashlib
import json
import logging
from typing import Iterable, List, Optional, Tuple

from gilded_rose.engine import UpdateEngine
from gilded_rose.models import Item

logger = logging.getLogger(__name__)


def inventory_hash(items: Iterable[Item]) -> str:
    """Compute SHA-256 of the canonical inventory JSON (order-sensitive)."""
    payload = [item.to_dict() for item in items]
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class Warehouse:
    """Backing collection of stocked items."""

    def __init__(self) -> None:
        self.items: List[Item] = []

    def __len__(self) -> int:
        return len(self.items)

    def clear(self) -> None:
        self.items.clear()


WAREHOUSE = Warehouse()


class Store:
    """
    Shop front over a warehouse.

    Usage:
        store = Store()            # shared process-wide WAREHOUSE
        store.add(Item("Aged Brie", 2, 0))
        store.tick_all()
    """

    def __init__(
        self,
        warehouse: Optional[Warehouse] = None,
        engine: Optional[UpdateEngine] = None,
    ) -> None:
        self.warehouse: Warehouse = warehouse if warehouse is not None else WAREHOUSE
        self.engine: UpdateEngine = engine if engine is not None else UpdateEngine()

    def add(self, item: Item) -> None:
        self.warehouse.items.append(item)
        logger.debug(
            "Stocked %r (sell_in=%d quality=%d category=%s)",
            item.name, item.sell_in, item.quality, item.category.value,
        )

    def count(self) -> int:
        return len(self.warehouse)

    def clear(self) -> None:
        removed = len(self.warehouse)
        self.warehouse.clear()
        logger.info("Warehouse cleared (%d items removed)", removed)

    def tick_all(self) -> None:
        """Advance every stocked item by one day."""
        self.engine.tick(self.warehouse.items)

    def items(self) -> Tuple[Item, ...]:
        return tuple(self.warehouse.items)
