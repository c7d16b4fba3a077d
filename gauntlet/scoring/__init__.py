"""Scoring engine: normalization, scores, tiers, aggregation, archetypes."""

from .aggregator import aggregate
from .archetype import classify_archetype, classify_status, interpret
from .calculator import calculate_score, classify_tier
from .engine import GauntletScorer
from .models import (
    Archetype,
    DomainSummary,
    Interpretation,
    Profile,
    ProfileAggregate,
    ProfileReport,
    Status,
    TestScore,
    Tier,
)
from .thresholds import age_bracket, resolve_thresholds
from .units import format_time, format_time_entry, normalize, parse_time

__all__ = [
    "GauntletScorer",
    "aggregate",
    "age_bracket",
    "calculate_score",
    "classify_archetype",
    "classify_status",
    "classify_tier",
    "format_time",
    "format_time_entry",
    "interpret",
    "normalize",
    "parse_time",
    "resolve_thresholds",
    "Archetype",
    "DomainSummary",
    "Interpretation",
    "Profile",
    "ProfileAggregate",
    "ProfileReport",
    "Status",
    "TestScore",
    "Tier",
]
