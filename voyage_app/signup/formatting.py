"""Display formatting for signup values."""

import math

BERRY_SUFFIX = "M฿"


def format_bounty(amount: float) -> str:
    """
    Format a bounty in millions of berries.

    Below 100 whole amounts show no decimals and fractional amounts show
    one; from 100 upward the amount is truncated to an integer.

    >>> format_bounty(42)
    '42M฿'
    >>> format_bounty(42.3)
    '42.3M฿'
    >>> format_bounty(150.7)
    '150M฿'
    """
    if amount < 100:
        if amount == math.floor(amount):
            return f"{amount:.0f}{BERRY_SUFFIX}"
        return f"{amount:.1f}{BERRY_SUFFIX}"
    return f"{int(amount)}{BERRY_SUFFIX}"


def format_character_count(text: str, max_length: int) -> str:
    """Counter shown under length-limited fields, e.g. "7/20"."""
    return f"{len(text)}/{max_length}"
