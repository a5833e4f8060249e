"""
Format checks shared by the purchase request serializers and services.
"""

import re
from typing import Any, Optional

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
# "+" then 2-15 digits, no leading zero after the plus
PHONE_PATTERN = re.compile(r"^\+[1-9]\d{1,14}$")

SENDER_NAME_MIN_LENGTH = 4
SENDER_NAME_MAX_LENGTH = 55

# Largest value a BigAutoField primary key can hold
MAX_IDENTITY = 9223372036854775807


def parse_identity(value: Any) -> Optional[int]:
    """Parse a client-supplied row identity ("7" or 7) into a positive int, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # isdigit() alone also accepts digits like "²" that int() rejects
        if not (value.isascii() and value.isdigit()):
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if 0 < value <= MAX_IDENTITY else None


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.match(value))
