from qr_inventory_api.client.inventory_view import (
    LowStockMonitor,
    filter_items,
    stock_level,
    summarize,
    unique_locations,
)


ITEMS = [
    {"id": 1, "itemName": "USB Cable", "quantity": 3, "location": "Shelf A2"},
    {"id": 2, "itemName": "HDMI cable", "quantity": 12, "location": "Shelf B1"},
    {"id": 3, "itemName": "Keyboard", "quantity": 7, "location": "Shelf A2"},
    {"id": 4, "itemName": "Mouse", "quantity": 0, "location": "Drawer"},
]


def ids(items):
    return [i["id"] for i in items]


def test_no_filters_returns_everything():
    assert ids(filter_items(ITEMS)) == [1, 2, 3, 4]


def test_search_is_case_insensitive_substring():
    assert ids(filter_items(ITEMS, search="CABLE")) == [1, 2]
    assert ids(filter_items(ITEMS, search="  key ")) == [3]


def test_location_filter():
    assert ids(filter_items(ITEMS, location="Shelf A2")) == [1, 3]


def test_low_stock_filter_combines_with_others():
    assert ids(filter_items(ITEMS, low_stock_only=True)) == [1, 4]
    assert ids(filter_items(ITEMS, search="cable", low_stock_only=True)) == [1]


def test_unique_locations_sorted():
    assert unique_locations(ITEMS) == ["Drawer", "Shelf A2", "Shelf B1"]


def test_summarize():
    assert summarize(ITEMS) == {"total_items": 4, "total_quantity": 22, "low_stock_items": 2}
    assert summarize([]) == {"total_items": 0, "total_quantity": 0, "low_stock_items": 0}


def test_stock_level():
    assert stock_level(0) == "low"
    assert stock_level(4) == "low"
    assert stock_level(5) == "medium"
    assert stock_level(9) == "medium"
    assert stock_level(10) == "ok"


def test_monitor_alerts_only_on_crossing():
    monitor = LowStockMonitor()
    assert monitor.observe(ITEMS) == []

    changed = [dict(i) for i in ITEMS]
    changed[2]["quantity"] = 4   # 7 -> 4 crosses the threshold
    changed[0]["quantity"] = 2   # already low
    alerts = monitor.observe(changed)
    assert ids(alerts) == [3]
    assert "Keyboard has 4 items remaining" in LowStockMonitor.alert_message(alerts[0])

    assert monitor.observe(changed) == []


def test_monitor_new_item_check():
    monitor = LowStockMonitor(threshold=5)
    assert monitor.check_new_item({"id": 9, "itemName": "Fuse", "quantity": 2, "location": "Box"})
    assert not monitor.check_new_item({"id": 9, "itemName": "Fuse", "quantity": 5, "location": "Box"})
