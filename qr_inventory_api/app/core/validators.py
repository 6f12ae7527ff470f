"""Small input checks shared by the services."""

import re

# Same shape the web client enforces: something@something.tld, no spaces.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))
