# bfstats/parser.py

import re
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float]

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_HOURS = re.compile(r"(\d+)\s*h", re.IGNORECASE)
_MINUTES = re.compile(r"(\d+)\s*m", re.IGNORECASE)

# Longer hour/minute components are junk, and int() caps digit strings on 3.11+.
_MAX_DURATION_DIGITS = 9


def _as_number(value: Decimal) -> Number:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def parse_number(text: Optional[str]) -> Number:
    """
    Parse a stat value as shown on the tracker page.

    Handles the formats the page renders:
    - plain numbers with thousands separators ("1,234" -> 1234)
    - percentages, returned unscaled ("45%" -> 45, "23.4%" -> 23.4)
    - thousands suffix ("2.3k" -> 2300)

    Only the leading number is read, so "12 kills" still gives 12.

    Args:
        text: Raw value text from a stat widget (may be None)

    Returns:
        int when the value is integral, float otherwise. 0 for empty or
        unparseable input; this never raises.
    """
    if not text:
        return 0

    clean = text.strip().replace(',', '')
    multiplier = 1

    if clean.endswith('%'):
        clean = clean[:-1]
    elif clean.lower().endswith('k'):
        clean = clean[:-1]
        multiplier = 1000

    match = _LEADING_NUMBER.match(clean.strip())
    if not match:
        return 0

    try:
        return _as_number(Decimal(match.group(0)) * multiplier)
    except (ArithmeticError, ValueError):
        # Digit runs beyond decimal/int conversion limits
        return 0


def _duration_component(match: Optional[re.Match], scale: int) -> int:
    if not match:
        return 0
    digits = match.group(1)
    if len(digits) > _MAX_DURATION_DIGITS:
        return 0
    return int(digits) * scale


def parse_duration_minutes(text: Optional[str]) -> int:
    """
    Parse a playtime string like '2h 15m', '45m' or '3h' into minutes.

    Hour and minute components are matched independently, so their order
    and spacing do not matter. A missing component contributes 0.
    """
    if not text:
        return 0

    clean = text.replace(',', '')
    hours = _duration_component(_HOURS.search(clean), 60)
    minutes = _duration_component(_MINUTES.search(clean), 1)
    return hours + minutes


def format_hours(total_minutes: int) -> str:
    """Format minutes as whole played hours, e.g. 135 -> '2h'."""
    return f"{total_minutes // 60}h"
