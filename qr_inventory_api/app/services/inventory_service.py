"""
Service layer for inventory items.

Every operation is scoped to the calling account.  An item owned by
someone else is reported exactly like a missing one (``NotFound``) so
that its existence is never confirmed.

Quantity only changes through ``adjust_quantity``, which applies a
signed delta with a single conditional ``UPDATE``.  The floor check and
the write happen in one statement, so concurrent adjustments on the
same item cannot overwrite each other and the stored quantity always
stays an integer between zero and ``MAX_QUANTITY``.
"""

import logging
import sqlite3
from typing import Callable, List

from ..core.config import Settings
from ..core.db import get_connection
from ..core.errors import InvalidOperation, NotFound, ValidationError
from ..schemas.item import MAX_QUANTITY, ItemCreate, ItemRead
from .qr_service import generate_qr_data_uri


logger = logging.getLogger(__name__)


class InventoryService:
    """Owner-scoped access to item records."""

    def __init__(
        self,
        settings: Settings,
        encoder: Callable[[str], str] = generate_qr_data_uri,
    ) -> None:
        self.settings = settings
        self.encoder = encoder

    async def create_item(self, owner_id: int, data: ItemCreate) -> ItemRead:
        """Insert an item, attach its QR code and return the stored record.

        The QR payload is the identifier SQLite assigns on insert, so the
        row is written first and the image attached afterwards.  Both
        writes share one transaction: if encoding fails the insert is
        rolled back and no item without a QR code is ever visible.
        """
        conn = get_connection(self.settings)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO items (user_id, item_name, category, quantity, location)
                VALUES (?, ?, ?, ?, ?)
                """,
                (owner_id, data.item_name, data.category, data.quantity, data.location),
            )
            item_id = cursor.lastrowid
            qr_code = self.encoder(str(item_id))
            cursor.execute(
                "UPDATE items SET qr_code = ? WHERE id = ?",
                (qr_code, item_id),
            )
            conn.commit()
            logger.info("Account %s created item %s (%s)", owner_id, item_id, data.item_name)
            row = cursor.execute("SELECT * FROM items WHERE id = ?", (item_id,)).fetchone()
            return self._row_to_item(row)
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    async def list_items(self, owner_id: int) -> List[ItemRead]:
        """Return the caller's items, newest first."""
        conn = get_connection(self.settings)
        try:
            rows = conn.execute(
                "SELECT * FROM items WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (owner_id,),
            ).fetchall()
            return [self._row_to_item(row) for row in rows]
        finally:
            conn.close()

    async def get_item(self, owner_id: int, item_id: str) -> ItemRead:
        """Return one item owned by the caller or raise ``NotFound``."""
        pk = self._parse_id(item_id)
        conn = get_connection(self.settings)
        try:
            row = self._fetch_owned(conn, owner_id, pk)
        finally:
            conn.close()
        if row is None:
            raise NotFound("Item not found.")
        return self._row_to_item(row)

    async def adjust_quantity(self, owner_id: int, item_id: str, delta: int) -> ItemRead:
        """Add ``delta`` (which may be negative) to an item's quantity.

        Raises
        ------
        NotFound
            If the caller owns no item with this identifier.
        InvalidOperation
            If the result would be negative or larger than
            ``MAX_QUANTITY``.  The stored quantity is left unchanged.
        """
        pk = self._parse_id(item_id)
        if not -MAX_QUANTITY <= delta <= MAX_QUANTITY:
            raise ValidationError("delta is out of range.")
        # Upper bound on the current quantity for the sum to stay an INTEGER.
        ceiling = MAX_QUANTITY - delta if delta > 0 else MAX_QUANTITY
        conn = get_connection(self.settings)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE items
                SET quantity = quantity + ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND user_id = ? AND quantity <= ? AND quantity + ? >= 0
                """,
                (delta, pk, owner_id, ceiling, delta),
            )
            if cursor.rowcount == 0:
                conn.rollback()
                current = self._fetch_owned(conn, owner_id, pk)
                if current is None:
                    raise NotFound("Item not found.")
                if current["quantity"] > ceiling:
                    raise InvalidOperation("Quantity is too large.")
                raise InvalidOperation("Quantity cannot be negative.")
            conn.commit()
            row = self._fetch_owned(conn, owner_id, pk)
        finally:
            conn.close()
        logger.info(
            "Account %s adjusted item %s by %+d (now %s)",
            owner_id,
            pk,
            delta,
            row["quantity"],
        )
        return self._row_to_item(row)

    @staticmethod
    def _parse_id(item_id: str) -> int:
        # Anything that cannot be a row id is simply not found.
        if not (item_id.isascii() and item_id.isdigit()):
            raise NotFound("Item not found.")
        pk = int(item_id)
        if pk > MAX_QUANTITY:
            raise NotFound("Item not found.")
        return pk

    @staticmethod
    def _fetch_owned(conn: sqlite3.Connection, owner_id: int, pk: int):
        return conn.execute(
            "SELECT * FROM items WHERE id = ? AND user_id = ?",
            (pk, owner_id),
        ).fetchone()

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> ItemRead:
        """Convert a database row to an ItemRead schema instance."""
        return ItemRead(
            id=row["id"],
            item_name=row["item_name"],
            category=row["category"],
            quantity=row["quantity"],
            location=row["location"],
            qr_code=row["qr_code"],
            user_id=row["user_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
