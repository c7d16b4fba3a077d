"""Display formatting of test values and threshold cells.

``format_value`` renders a normalized value with a compact unit suffix;
``parse_value`` reads such a string back. A formatted string is a fixed
point: formatting the parsed value reproduces it. Reps and meters keep
every digit; multiples, feet and seconds keep their display precision.
"""

import math

from gauntlet.loader.models import Unit
from gauntlet.scoring.units import as_number, format_time, parse_time

MISSING = "-"

UNIT_LABELS: dict[Unit, str] = {
    Unit.REPS: "reps",
    Unit.SECONDS: "MM:SS",
    Unit.FEET: "ft",
    Unit.METERS: "m",
    Unit.BODYWEIGHT_MULTIPLE: "xBW",
}

# Longest suffix first so "x BW" is stripped before "x"
_SUFFIXES = ("x bw", "xbw", "ft", "x", "s", "m")


def _plain_number(value: float) -> str:
    """Shortest text that reads back as the same number."""
    number = float(value)
    if number.is_integer():
        return f"{number:.0f}"
    return repr(number)


def format_value(unit: Unit, value: float | None) -> str:
    """Render a normalized value for display.

    >>> format_value(Unit.SECONDS, 585)
    '9:45'
    >>> format_value(Unit.BODYWEIGHT_MULTIPLE, 1.5)
    '1.50x'
    """
    if value is None or not math.isfinite(value):
        return MISSING

    if unit is Unit.BODYWEIGHT_MULTIPLE:
        return f"{value:.2f}x"
    if unit is Unit.SECONDS:
        if 0 <= value < 60:
            return f"{math.floor(value)}s"
        return format_time(value)
    if unit is Unit.FEET:
        return f"{value:.1f}ft"
    if unit is Unit.METERS:
        return f"{_plain_number(value)}m"
    return _plain_number(value)


def parse_value(unit: Unit, text: str) -> float | None:
    """Parse a displayed value back into a normalized number."""
    cleaned = text.strip().lower()
    if not cleaned or cleaned == MISSING:
        return None

    if unit is Unit.SECONDS and ":" in cleaned:
        seconds = parse_time(cleaned)
        return float(seconds) if seconds is not None else None

    for suffix in _SUFFIXES:
        if cleaned.endswith(suffix):
            cleaned = cleaned[: -len(suffix)].strip()
            break
    return as_number(cleaned)


def format_standard(unit: Unit, value: float) -> str:
    """Render a threshold cell for the standards table."""
    if unit is Unit.BODYWEIGHT_MULTIPLE:
        return f"{value:.2f}x BW"
    if unit is Unit.SECONDS:
        return format_time(value)
    if unit is Unit.FEET:
        return f"{value:.1f} ft"
    if unit is Unit.METERS:
        return f"{_plain_number(value)} m"
    return _plain_number(value)
