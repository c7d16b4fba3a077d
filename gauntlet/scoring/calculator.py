"""Piecewise-linear score calculation and tier classification.

Scores are anchored at the thresholds:

    basic -> 33, athletic -> 66, elite -> 100

Below basic the score scales proportionally towards 0. Beyond elite a bonus
of up to 10 points is computed from the excess (as a fraction of 20% of
elite) and the result is clamped to 100. Lower-is-better tests mirror every
ratio.
"""

import math

from gauntlet.loader.models import Direction, ThresholdTriple
from gauntlet.scoring.models import Tier

BASIC_SCORE = 33.0
ATHLETIC_SCORE = 66.0
ELITE_SCORE = 100.0

EXCESS_FRACTION = 0.2
MAX_BONUS = 10.0

MIN_SCORE = 0.0
MAX_SCORE = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _score_higher(value: float, t: ThresholdTriple) -> float:
    if value < t.basic:
        return _clamp(value / t.basic * BASIC_SCORE, MIN_SCORE, BASIC_SCORE)
    if value < t.athletic:
        return BASIC_SCORE + (value - t.basic) / (t.athletic - t.basic) * (
            ATHLETIC_SCORE - BASIC_SCORE
        )
    if value < t.elite:
        return ATHLETIC_SCORE + (value - t.athletic) / (t.elite - t.athletic) * (
            ELITE_SCORE - ATHLETIC_SCORE
        )
    bonus = min(MAX_BONUS, (value - t.elite) / (t.elite * EXCESS_FRACTION) * MAX_BONUS)
    return ELITE_SCORE + bonus


def _score_lower(value: float, t: ThresholdTriple) -> float:
    if value > t.basic:
        return _clamp(t.basic / value * BASIC_SCORE, MIN_SCORE, BASIC_SCORE)
    if value > t.athletic:
        return BASIC_SCORE + (t.basic - value) / (t.basic - t.athletic) * (
            ATHLETIC_SCORE - BASIC_SCORE
        )
    if value > t.elite:
        return ATHLETIC_SCORE + (t.athletic - value) / (t.athletic - t.elite) * (
            ELITE_SCORE - ATHLETIC_SCORE
        )
    bonus = min(MAX_BONUS, (t.elite - value) / (t.elite * EXCESS_FRACTION) * MAX_BONUS)
    return ELITE_SCORE + bonus


def calculate_score(
    value: float | None,
    thresholds: ThresholdTriple | None,
    direction: Direction,
) -> float:
    """Score a normalized value against a threshold triple.

    Args:
        value: Normalized value, None when absent or malformed.
        thresholds: Triple for the profile, None when unscoreable.
        direction: Whether larger values are better.

    Returns:
        Score in [0, 100]. Never raises and never returns NaN.
    """
    if value is None or thresholds is None or not math.isfinite(value):
        return MIN_SCORE

    try:
        if direction is Direction.HIGHER_IS_BETTER:
            score = _score_higher(value, thresholds)
        else:
            score = _score_lower(value, thresholds)
    except ZeroDivisionError:
        return MIN_SCORE

    if not math.isfinite(score):
        return MIN_SCORE
    return _clamp(score, MIN_SCORE, MAX_SCORE)


def classify_tier(
    value: float | None,
    thresholds: ThresholdTriple | None,
    direction: Direction,
) -> Tier:
    """Classify a normalized value into a tier by direct comparison."""
    if value is None or thresholds is None or not math.isfinite(value):
        return Tier.BELOW

    if direction is Direction.HIGHER_IS_BETTER:
        if value >= thresholds.elite:
            return Tier.ELITE
        if value >= thresholds.athletic:
            return Tier.ATHLETIC
        if value >= thresholds.basic:
            return Tier.BASIC
    else:
        if value <= thresholds.elite:
            return Tier.ELITE
        if value <= thresholds.athletic:
            return Tier.ATHLETIC
        if value <= thresholds.basic:
            return Tier.BASIC
    return Tier.BELOW
