"""Unit normalization: raw results to comparable numbers.

Every function here is total. Absent or malformed input becomes ``None``,
which downstream means "not attempted" rather than zero.
"""

import logging
import math
import re
from collections.abc import Callable
from typing import Any

from gauntlet.loader.models import Computation, TestSpec, Unit

logger = logging.getLogger(__name__)

MAX_ENTRY_MINUTES = 99
MAX_ENTRY_SECONDS = 59

# M:SS or MM:SS, seconds always two digits
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_ENTRY_STRIP = re.compile(r"[^\d:]")


def as_number(value: Any) -> float | None:
    """Coerce a number or numeric string to a finite float.

    Booleans, NaN, infinities and anything unparseable become None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_absent(raw: Any) -> bool:
    """Whether a raw result means "not attempted"."""
    return raw is None or (isinstance(raw, str) and not raw.strip())


def parse_time(text: Any) -> int | None:
    """Parse ``M:SS`` into whole seconds.

    Minutes are one or two digits (0-99); seconds are exactly two digits
    below 60.

    >>> parse_time("9:45")
    585
    >>> parse_time("9:75") is None
    True
    """
    if not isinstance(text, str):
        return None
    match = _TIME_PATTERN.match(text.strip())
    if match is None:
        return None
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if seconds >= 60:
        return None
    return minutes * 60 + seconds


def format_time(total_seconds: Any) -> str:
    """Format seconds as ``M:SS``; fractions are floored.

    Absent, negative or non-finite values render as ``0:00``.
    """
    value = as_number(total_seconds)
    if value is None or value < 0:
        return "0:00"
    whole = int(math.floor(value))
    return f"{whole // 60}:{whole % 60:02d}"


def _clamp_segment(digits: str, limit: int) -> int:
    # Compare by length first; int() refuses very long digit strings
    significant = digits.lstrip("0")
    if len(significant) > len(str(limit)):
        return limit
    return min(limit, int(significant or "0"))


def format_time_entry(text: str) -> str:
    """Format a partially typed time for an entry field.

    Strips anything but digits and ``:``, inserts ``:`` after the second
    digit when missing, and once both segments exist clamps minutes to 99
    and seconds to 59 with seconds zero-padded. Applying it to its own
    output returns the same string.
    """
    formatted = _ENTRY_STRIP.sub("", text or "")

    if len(formatted) >= 2 and ":" not in formatted:
        formatted = formatted[:2] + ":" + formatted[2:]

    parts = formatted.split(":")
    if len(parts) == 2:
        minutes = _clamp_segment(parts[0], MAX_ENTRY_MINUTES)
        seconds = _clamp_segment(parts[1], MAX_ENTRY_SECONDS)
        formatted = f"{minutes}:{seconds:02d}"

    return formatted


def bodyweight_multiple(lift: Any, bodyweight: Any) -> float | None:
    """Lift divided by bodyweight; None without a positive bodyweight."""
    lift_value = as_number(lift)
    bodyweight_value = as_number(bodyweight)
    if lift_value is None or bodyweight_value is None or bodyweight_value <= 0:
        return None
    multiple = lift_value / bodyweight_value
    return multiple if math.isfinite(multiple) else None


def _normalize_seconds(raw: Any) -> float | None:
    # Numbers are already seconds
    if isinstance(raw, str):
        seconds = parse_time(raw)
        return float(seconds) if seconds is not None else None
    return as_number(raw)


UNIT_NORMALIZERS: dict[Unit, Callable[[Any], float | None]] = {
    Unit.REPS: as_number,
    Unit.SECONDS: _normalize_seconds,
    Unit.FEET: as_number,
    Unit.METERS: as_number,
    Unit.BODYWEIGHT_MULTIPLE: as_number,
}


def normalize(
    spec: TestSpec, raw: Any, bodyweight: float | None = None
) -> float | None:
    """Convert a raw result into the value compared against thresholds.

    Args:
        spec: Test metadata.
        raw: Number or time string as entered.
        bodyweight: Bodyweight for bodyweight-relative tests.

    Returns:
        Seconds for time tests, a multiplier for bodyweight-relative tests,
        the number itself otherwise; None when absent or malformed.
    """
    if is_absent(raw):
        return None

    if spec.computation is Computation.BODYWEIGHT_RELATIVE:
        value = bodyweight_multiple(raw, bodyweight)
    else:
        value = UNIT_NORMALIZERS[spec.unit](raw)

    if value is None:
        logger.debug(
            "Malformed result for %s: raw=%r bodyweight=%r", spec.name, raw, bodyweight
        )
    return value
