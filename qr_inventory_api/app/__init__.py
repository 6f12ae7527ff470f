"""FastAPI application for the QR inventory service."""
