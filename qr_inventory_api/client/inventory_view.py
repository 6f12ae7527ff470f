"""
Local search, filtering and totals over an already fetched item list.

Items are the dictionaries returned by :class:`InventoryClient`
(``id``, ``itemName``, ``quantity``, ``location`` ...).  Nothing here
talks to the server.
"""

from typing import Any, Dict, Iterable, List, Optional

LOW_STOCK_THRESHOLD = 5
MEDIUM_STOCK_THRESHOLD = 10

Item = Dict[str, Any]


def is_low_stock(item: Item, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
    return item["quantity"] < threshold


def stock_level(quantity: int, threshold: int = LOW_STOCK_THRESHOLD) -> str:
    """Classify a quantity as ``"low"``, ``"medium"`` or ``"ok"``."""
    if quantity < threshold:
        return "low"
    if quantity < MEDIUM_STOCK_THRESHOLD:
        return "medium"
    return "ok"


def filter_items(
    items: Iterable[Item],
    search: str = "",
    location: Optional[str] = None,
    low_stock_only: bool = False,
    threshold: int = LOW_STOCK_THRESHOLD,
) -> List[Item]:
    """Return the items matching every given filter.

    ``search`` is a case-insensitive substring of the item name,
    ``location`` must match exactly and ``low_stock_only`` keeps items
    below ``threshold``.  Empty filters match everything.
    """
    needle = search.strip().lower()
    result = []
    for item in items:
        if needle and needle not in item["itemName"].lower():
            continue
        if location and item["location"] != location:
            continue
        if low_stock_only and not is_low_stock(item, threshold):
            continue
        result.append(item)
    return result


def unique_locations(items: Iterable[Item]) -> List[str]:
    """Sorted distinct locations, for building a location filter."""
    return sorted({item["location"] for item in items})


def summarize(items: Iterable[Item], threshold: int = LOW_STOCK_THRESHOLD) -> Dict[str, int]:
    """Totals shown above the item table."""
    items = list(items)
    return {
        "total_items": len(items),
        "total_quantity": sum(item["quantity"] for item in items),
        "low_stock_items": sum(1 for item in items if is_low_stock(item, threshold)),
    }


class LowStockMonitor:
    """Detects items that dropped below the low-stock threshold.

    Feed it every freshly loaded item list through :meth:`observe`; it
    returns the items whose quantity was at or above the threshold in the
    previous list and is below it now.  Items seen for the first time
    never alert here; use :meth:`check_new_item` right after creating one.
    """

    def __init__(self, threshold: int = LOW_STOCK_THRESHOLD) -> None:
        self.threshold = threshold
        self._previous: Dict[Any, int] = {}

    def observe(self, items: Iterable[Item]) -> List[Item]:
        items = list(items)
        alerts = []
        for item in items:
            before = self._previous.get(item["id"])
            if before is not None and before >= self.threshold and item["quantity"] < self.threshold:
                alerts.append(item)
        self._previous = {item["id"]: item["quantity"] for item in items}
        return alerts

    def check_new_item(self, item: Item) -> bool:
        """True if an item was created with a quantity already below the threshold."""
        return is_low_stock(item, self.threshold)

    @staticmethod
    def alert_message(item: Item) -> str:
        return f"Low Stock Alert: {item['itemName']} has {item['quantity']} items remaining!"
