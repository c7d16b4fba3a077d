"""Data models for scoring results and profile interpretation."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gauntlet.loader.models import ThresholdTriple, Unit


class Tier(StrEnum):
    """Discrete performance bracket of a single test."""

    ELITE = "elite"
    ATHLETIC = "athletic"
    BASIC = "basic"
    BELOW = "below"


class Archetype(StrEnum):
    """Balance between the force and engine domains."""

    TANK = "tank"
    SCOUT = "scout"
    RANGER = "ranger"

    @property
    def label(self) -> str:
        return _ARCHETYPE_LABELS[self]


class Status(StrEnum):
    """Narrative band of the overall score."""

    UNDER_CONSTRUCTION = "under-construction"
    FIT_EXECUTIVE = "fit-executive"
    HYBRID_BEAST = "hybrid-beast"

    @property
    def label(self) -> str:
        return _STATUS_TEXT[self][0]

    @property
    def narrative(self) -> str:
        return _STATUS_TEXT[self][1]


_ARCHETYPE_LABELS = {
    Archetype.TANK: "The Tank (High Force, Low Range)",
    Archetype.SCOUT: "The Scout (High Engine, Low Armor)",
    Archetype.RANGER: "The Ranger (Well Rounded)",
}

_STATUS_TEXT = {
    Status.UNDER_CONSTRUCTION: (
        "Under Construction",
        "You have foundational gaps. Prioritize structural strength and "
        "aerobic base.",
    ),
    Status.FIT_EXECUTIVE: (
        "The Fit Executive",
        "You are capable and fit, but you lack the elite spike. To progress, "
        "you must periodize your training blocks.",
    ),
    Status.HYBRID_BEAST: (
        "Hybrid Beast",
        "You are in the top 1% of the population. You possess a rare "
        "combination of mass and gas.",
    ),
}


class Profile(BaseModel):
    """Demographic profile every scoring call is made against."""

    model_config = ConfigDict(frozen=True)

    gender: str = Field(..., description="Gender key used in the catalog", min_length=1)
    age: int = Field(..., description="Age in years (21 or older)", ge=21)
    bodyweight: float | None = Field(
        None, description="Bodyweight in lbs for bodyweight-relative tests", gt=0
    )

    @field_validator("gender")
    @classmethod
    def normalize_gender(cls, v: str) -> str:
        """Gender keys are matched case-insensitively."""
        return v.strip().lower()


class TestScore(BaseModel):
    """Score and tier of one test for one profile."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    test_name: str = Field(..., description="Test name")
    unit: Unit | None = Field(None, description="Unit of the value (None if unknown)")
    raw: float | str | None = Field(None, description="Raw result as entered")
    value: float | None = Field(
        None, description="Normalized value (None if absent or malformed)"
    )
    score: float = Field(..., description="Score (0-100)", ge=0.0, le=100.0)
    tier: Tier = Field(..., description="Tier label")
    thresholds: ThresholdTriple | None = Field(
        None, description="Thresholds used (None if unscoreable)"
    )

    @property
    def attempted(self) -> bool:
        """Whether the result counts as completed."""
        return self.value is not None

    @property
    def scoreable(self) -> bool:
        """Whether thresholds exist for this test and profile."""
        return self.thresholds is not None


class DomainSummary(BaseModel):
    """Average score and completion of one domain."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Domain name")
    average: float = Field(..., description="Mean score of completed tests", ge=0.0)
    completed: int = Field(..., description="Completed tests", ge=0)
    total: int = Field(..., description="Tests in the domain", ge=0)
    tests: list[str] = Field(default_factory=list, description="Tests in the domain")


class ProfileAggregate(BaseModel):
    """Per-domain summaries and the overall score."""

    model_config = ConfigDict(frozen=True)

    domains: dict[str, DomainSummary] = Field(default_factory=dict)
    overall: float = Field(..., description="Mean over completed tests", ge=0.0)
    completed: int = Field(..., description="Completed tests overall", ge=0)
    total: int = Field(..., description="Tests across all domains", ge=0)

    def average(self, domain: str) -> float:
        """Average of a domain, 0 when the domain is unknown."""
        summary = self.domains.get(domain)
        return summary.average if summary else 0.0


class Interpretation(BaseModel):
    """Archetype and status band of a profile."""

    model_config = ConfigDict(frozen=True)

    archetype: Archetype
    status: Status

    def to_dict(self) -> dict[str, Any]:
        return {
            "archetype": self.archetype.value,
            "archetype_label": self.archetype.label,
            "status": self.status.value,
            "status_label": self.status.label,
            "narrative": self.status.narrative,
        }


class ProfileReport(BaseModel):
    """Complete evaluation of a set of raw results for one profile."""

    catalog_name: str = Field(..., description="Standards catalog used")
    profile: Profile
    age_bracket: str | None = Field(None, description="Resolved age bracket")
    tests: list[TestScore] = Field(default_factory=list)
    aggregate: ProfileAggregate
    interpretation: Interpretation
    unknown_tests: list[str] = Field(
        default_factory=list, description="Result names missing from the catalog"
    )

    @property
    def overall(self) -> float:
        return self.aggregate.overall

    def get(self, test_name: str) -> TestScore | None:
        """Get the score of a test by name."""
        for test in self.tests:
            if test.test_name == test_name:
                return test
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "catalog": self.catalog_name,
            "profile": self.profile.model_dump(),
            "age_bracket": self.age_bracket,
            "overall": round(self.aggregate.overall, 2),
            "completed": self.aggregate.completed,
            "total": self.aggregate.total,
            "domains": {
                name: {
                    "average": round(summary.average, 2),
                    "completed": summary.completed,
                    "total": summary.total,
                }
                for name, summary in self.aggregate.domains.items()
            },
            "tests": {
                test.test_name: {
                    "raw": test.raw,
                    "value": test.value,
                    "score": round(test.score, 2),
                    "tier": test.tier.value,
                    "attempted": test.attempted,
                    "thresholds": (
                        test.thresholds.model_dump() if test.thresholds else None
                    ),
                }
                for test in self.tests
            },
            "interpretation": self.interpretation.to_dict(),
            "unknown_tests": list(self.unknown_tests),
        }
