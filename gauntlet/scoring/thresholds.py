"""Threshold lookup by gender and age bracket."""

import logging

from gauntlet.loader.models import StandardsCatalog, ThresholdTriple

logger = logging.getLogger(__name__)

MINIMUM_AGE = 21

# (inclusive upper bound, bracket); None means open-ended
_BRACKET_BOUNDS: tuple[tuple[int | None, str], ...] = (
    (34, "21-34"),
    (39, "35-39"),
    (44, "40-44"),
    (49, "45-49"),
    (None, "50+"),
)


def age_bracket(age: int) -> str | None:
    """Map an age in years to its bracket key.

    Ages below 21 have no bracket and return None, so every threshold
    lookup for them misses.
    """
    if age < MINIMUM_AGE:
        return None
    for upper, bracket in _BRACKET_BOUNDS:
        if upper is None or age <= upper:
            return bracket
    return None


def resolve_thresholds(
    catalog: StandardsCatalog,
    test_name: str,
    gender: str,
    bracket: str | None,
) -> ThresholdTriple | None:
    """Get the triple for a test, or None when the test is unscoreable."""
    triple = None
    if bracket is not None:
        triple = catalog.thresholds(test_name, gender.lower(), bracket)
    if triple is None:
        logger.debug(
            "No thresholds for %s (gender=%s, bracket=%s)", test_name, gender, bracket
        )
    return triple
