"""
Client-side helpers for the QR inventory API.

``InventoryClient`` talks to the REST API, ``inventory_view`` filters
and summarises an already fetched item list, ``LowStockMonitor`` spots
items that just fell below the low-stock threshold and ``scanner``
decodes item identifiers from QR images.
"""

from .api_client import InventoryClient
from .credentials import CredentialStore, MemoryCredentialStore
from .inventory_view import (
    LOW_STOCK_THRESHOLD,
    LowStockMonitor,
    filter_items,
    stock_level,
    summarize,
    unique_locations,
)
from .scanner import decode_data_uri, decode_image

__all__ = [
    "InventoryClient",
    "CredentialStore",
    "MemoryCredentialStore",
    "LOW_STOCK_THRESHOLD",
    "LowStockMonitor",
    "filter_items",
    "stock_level",
    "summarize",
    "unique_locations",
    "decode_data_uri",
    "decode_image",
]
