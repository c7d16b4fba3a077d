"""Standards catalog loading and validation."""

from gauntlet.loader.loader import DEFAULT_STANDARDS_PATH, StandardsLoader
from gauntlet.loader.models import (
    AGE_BRACKETS,
    ArchetypeConfig,
    Computation,
    Direction,
    StandardsCatalog,
    TestSpec,
    ThresholdTriple,
    Unit,
)
from gauntlet.loader.results import ResultsLoader, ResultsSheet

__all__ = [
    "AGE_BRACKETS",
    "ArchetypeConfig",
    "Computation",
    "DEFAULT_STANDARDS_PATH",
    "Direction",
    "ResultsLoader",
    "ResultsSheet",
    "StandardsCatalog",
    "StandardsLoader",
    "TestSpec",
    "ThresholdTriple",
    "Unit",
]
