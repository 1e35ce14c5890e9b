"""
AuroraSync Server - Client Field Parsing

This module parses the integer fields clients send with inventories and
uploads (lastModified, size). Anything that is not a plain signed 64-bit
decimal integer yields the caller's default.
"""

import re
from typing import Optional

# Optional sign and ASCII digits only; no underscores, no other scripts' digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def ParseIntField(value: Optional[str], default: int) -> int:
    """
    Parse an integer field sent by a client

    Surrounding whitespace is allowed. Values outside the signed 64-bit range
    are rejected.

    Args:
        value: Raw field text (may be None)
        default: Value returned for anything unparseable

    Returns:
        int: Parsed value or default
    """
    text = (value or "").strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return default

    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        return default
    return number
