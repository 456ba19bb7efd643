"""
Quantity literal handling.
"""
import re
from typing import Any

DEFAULT_QUANTITY = 1

_QUANTITY_LITERAL = re.compile(r'\d+', re.ASCII)


def parse_quantity(value: Any) -> int:
    """
    Resolve a requested quantity.

    Only non-negative integer literals are honoured (``3``, ``"3"``, ``"007"``).
    Anything else, negatives, decimals, floats, booleans and junk strings
    included, falls back to 1.
    """
    if isinstance(value, bool):
        return DEFAULT_QUANTITY
    if isinstance(value, int):
        return value if value >= 0 else DEFAULT_QUANTITY
    if isinstance(value, str) and _QUANTITY_LITERAL.fullmatch(value):
        return int(value)
    return DEFAULT_QUANTITY


def clamp_quantity(quantity: int, maximum: int) -> int:
    return min(quantity, maximum)
