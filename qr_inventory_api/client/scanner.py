"""
Decode item identifiers from QR code images.

Decoding happens entirely on the client; the server is never involved.
Both functions return the decoded text or ``None`` when no QR code can
be read.
"""

import base64
import binascii
import logging
from typing import Optional

import cv2
import numpy as np


logger = logging.getLogger(__name__)


def decode_image(pixels: np.ndarray) -> Optional[str]:
    """Decode a QR code from an image array (grayscale or BGR)."""
    detector = cv2.QRCodeDetector()
    try:
        text, points, _ = detector.detectAndDecode(pixels)
    except cv2.error as exc:
        logger.warning("QR detection failed: %s", exc)
        return None
    if points is None or not text:
        return None
    return text


def decode_data_uri(data_uri: str) -> Optional[str]:
    """Decode the QR code in a ``data:image/...;base64,`` URI."""
    header, sep, payload = data_uri.partition(",")
    if not sep or not header.startswith("data:image/") or not header.endswith(";base64"):
        logger.warning("Not a base64 image data URI")
        return None
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Image data URI has an invalid base64 payload")
        return None
    if not raw:
        logger.warning("Image data URI is empty")
        return None
    try:
        pixels = cv2.imdecode(np.frombuffer(raw, dtype=np.uint8), cv2.IMREAD_GRAYSCALE)
    except cv2.error as exc:
        logger.warning("Could not read image: %s", exc)
        return None
    if pixels is None:
        return None
    return decode_image(pixels)
