"""Archetype and status classification of an aggregated profile."""

import math

from gauntlet.loader.models import ArchetypeConfig
from gauntlet.scoring.models import (
    Archetype,
    Interpretation,
    ProfileAggregate,
    Status,
)

# Percent difference between the opposing domains that tips the balance
DIFFERENCE_THRESHOLD_PCT = 15.0

UNDER_CONSTRUCTION_BELOW = 33
HYBRID_BEAST_ABOVE = 66


def classify_archetype(force: float, engine: float) -> Archetype:
    """Classify the balance between the force and engine averages.

    >>> classify_archetype(80.0, 60.0)
    <Archetype.TANK: 'tank'>
    """
    if force <= 0 and engine <= 0:
        return Archetype.RANGER
    if engine <= 0:
        return Archetype.TANK
    if force <= 0:
        return Archetype.SCOUT

    larger = max(force, engine)
    diff_force = (force - engine) / larger * 100
    diff_engine = (engine - force) / larger * 100

    if diff_force > DIFFERENCE_THRESHOLD_PCT:
        return Archetype.TANK
    if diff_engine > DIFFERENCE_THRESHOLD_PCT:
        return Archetype.SCOUT
    return Archetype.RANGER


def display_score(overall: float) -> int:
    """Round half-up to the integer shown to users."""
    return int(math.floor(overall + 0.5))


def classify_status(overall: float) -> Status:
    """Band the overall score as it is displayed (rounded half-up)."""
    shown = display_score(overall)
    if shown < UNDER_CONSTRUCTION_BELOW:
        return Status.UNDER_CONSTRUCTION
    if shown > HYBRID_BEAST_ABOVE:
        return Status.HYBRID_BEAST
    return Status.FIT_EXECUTIVE


def interpret(
    aggregate: ProfileAggregate, config: ArchetypeConfig | None = None
) -> Interpretation:
    """Archetype and status of an aggregated profile."""
    config = config or ArchetypeConfig()
    return Interpretation(
        archetype=classify_archetype(
            aggregate.average(config.force_domain),
            aggregate.average(config.engine_domain),
        ),
        status=classify_status(aggregate.overall),
    )
