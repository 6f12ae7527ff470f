"""
QR code generation for item identifiers.

The payload is the item identifier as a plain string.  The image is
returned as a ``data:image/png;base64,...`` URI so it can be stored on
the item record and dropped straight into an ``<img>`` tag.
"""

import base64
import io

import qrcode
from qrcode.constants import ERROR_CORRECT_M


def generate_qr_data_uri(payload: str) -> str:
    """Render ``payload`` as a QR code and return it as a PNG data URI."""
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, box_size=8, border=4)
    qr.add_data(payload)
    qr.make(fit=True)
    image = qr.make_image()
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
