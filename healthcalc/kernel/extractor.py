"""Pick usable values out of raw measurement slots.

Every function returns None for anything it cannot use and never raises.
"""

from __future__ import annotations

import math
from typing import Any

GENDERS: tuple[str, ...] = ("male", "female")


def usable_number(value: Any) -> int | float | None:
    """Return `value` if it is a finite int/float, else None.

    Bools are rejected even though they subclass int. Strings are not
    parsed. Ints too large for a float are rejected; the int type is kept
    otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        as_float = float(value)
    except OverflowError:
        return None
    if not math.isfinite(as_float):
        return None
    return value


def usable_gender(value: Any) -> str | None:
    """Exactly "male" or "female"; any other spelling is unusable."""
    if isinstance(value, str) and value in GENDERS:
        return value
    return None


def usable_skinfold(value: Any) -> int | None:
    """Skinfold readings must be whole numbers to enter the 7-site protocol."""
    if isinstance(value, int) and usable_number(value) is not None:
        return value
    return None


def usable_activity(value: Any, low: float, high: float) -> int | float | None:
    """Activity factor inside [low, high], else None."""
    factor = usable_number(value)
    if factor is None or factor < low or factor > high:
        return None
    return factor
