"""
Quantity coercion shared by the line parser and quantity overrides.
"""

import math
from typing import Any


def clamp_quantity(value: Any) -> int:
    """
    Coerce any input into a positive integer quantity.

    - 3 → 3
    - 3.7 → 3 (floored)
    - 0, -5, 0.4 → 1
    - NaN, inf, None, "abc" → 1
    - 10**400 → 10**400 (ints are kept exact)

    Args:
        value: Raw quantity (int, float, numeric string, ...)

    Returns:
        Integer >= 1
    """
    if isinstance(value, bool):
        return 1

    # Ints never go through float: no precision loss, no overflow
    if isinstance(value, int):
        return max(1, value)

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 1

    if not math.isfinite(number):
        return 1

    return max(1, math.floor(number))
