"""Small numeric helpers shared by the accumulators."""

import math
import re

from .constants import Bounds

# Leading decimal number, e.g. "150", "1.5kg", " .25 ", "2e1"
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def round_to_step(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step`` (ties go up)."""
    if step >= 1:
        return round_half_up(value / step) * step
    # Divide by the inverse so 0.25 / 0.1 steps come out as exact decimals.
    inverse = round(1 / step)
    return round_half_up(value * inverse) / inverse


def round_places(value: float, places: int = 2) -> float:
    factor = 10**places
    return round_half_up(value * factor) / factor


def clamp(value: float, bounds: Bounds) -> float:
    return max(bounds.lower, min(bounds.upper, value))


def parse_number(value: object) -> float | None:
    """
    Parse a number leniently, the way form inputs arrive.

    Numbers pass through, strings are read up to the first non-numeric
    character ("150g" -> 150.0). Returns None for anything unparseable,
    including NaN and booleans.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
