"""Lenient numeric coercion for raw quote inputs.

Quote inputs arrive from forms and config files as numbers, numeric
strings, blanks, or garbage. The engine never rejects them; anything that
is not a finite number becomes 0.
"""

from __future__ import annotations

import math
from typing import Any

__all__ = ["to_count", "to_number"]


def to_number(value: Any) -> float:
    """Coerce a value to a finite float, 0.0 when it is not numeric.

    Examples:
        >>> to_number("30.25")
        30.25
        >>> to_number("")
        0.0
        >>> to_number(None)
        0.0
    """
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def to_count(value: Any, minimum: int = 0) -> int:
    """Coerce a value to an integer count no smaller than ``minimum``.

    Fractional input is truncated toward zero.

    Examples:
        >>> to_count("3")
        3
        >>> to_count("abc")
        0
        >>> to_count(-2)
        0
        >>> to_count("", minimum=1)
        1
    """
    return max(minimum, int(to_number(value)))
