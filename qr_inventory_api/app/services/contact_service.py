"""
Contact form submissions.

Messages are appended to ``contact_messages`` and logged; there is no
read API.  Submissions are not tied to an account.
"""

import logging

from ..core.config import Settings
from ..core.db import get_cursor
from ..core.errors import ValidationError
from ..core.validators import is_valid_email
from ..schemas.contact import ContactAck, ContactCreate


logger = logging.getLogger(__name__)

THANK_YOU = "Thank you for contacting us! We will get back to you soon."


class ContactService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def submit(self, data: ContactCreate) -> ContactAck:
        """Store a contact message and return the acknowledgement text."""
        if not is_valid_email(data.email):
            raise ValidationError("Invalid email format.")
        with get_cursor(self.settings) as cursor:
            cursor.execute(
                "INSERT INTO contact_messages (name, email, message) VALUES (?, ?, ?)",
                (data.name, data.email, data.message),
            )
            message_id = cursor.lastrowid
        logger.info("New contact submission %s from %s <%s>", message_id, data.name, data.email)
        return ContactAck(message=THANK_YOU)
