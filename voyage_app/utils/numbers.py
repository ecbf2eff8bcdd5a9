"""
Strict decimal parsing for raw user-entered amount text.

Python's float() is more permissive than an amount field should be: it
trims whitespace, accepts digit-group underscores and spells out
infinity and nan. It also takes digits from any Unicode script. Amount
text goes through parse_decimal instead, which only accepts a plain
ASCII decimal literal and returns None for anything else.
"""

import math
import re
from typing import Optional

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_decimal(text: str) -> Optional[float]:
    """
    Parse text as a decimal number.

    Args:
        text: Raw text, e.g. "1000", "-2.5", ".5", "1e3"

    Returns:
        The parsed finite value, or None when text is not a plain decimal
        literal (empty, embedded whitespace or commas, "inf", "nan", ...)
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        # Literal too large for a float, e.g. "1e999"
        return None
    return value


def strip_group_separators(text: str) -> str:
    """Remove thousands-separator commas ("1,000.5" -> "1000.5")."""
    return text.replace(",", "")
