"""QR Inventory API package."""
