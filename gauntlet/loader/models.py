"""Data models for the standards catalog."""

import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

AGE_BRACKETS: tuple[str, ...] = ("21-34", "35-39", "40-44", "45-49", "50+")


class Unit(StrEnum):
    """Measurement unit a test is recorded and compared in."""

    REPS = "reps"
    SECONDS = "seconds"
    FEET = "feet"
    METERS = "meters"
    BODYWEIGHT_MULTIPLE = "bodyweight-multiple"


class Direction(StrEnum):
    """Which way along the unit is the better performance."""

    HIGHER_IS_BETTER = "higher-is-better"
    LOWER_IS_BETTER = "lower-is-better"


class Computation(StrEnum):
    """How a raw result becomes the compared value."""

    ABSOLUTE = "absolute"
    BODYWEIGHT_RELATIVE = "bodyweight-relative"


class ThresholdTriple(BaseModel):
    """Basic/athletic/elite cut-points for one test, gender and age bracket."""

    model_config = ConfigDict(frozen=True)

    basic: float = Field(..., description="Boundary of the basic tier")
    athletic: float = Field(..., description="Boundary of the athletic tier")
    elite: float = Field(..., description="Boundary of the elite tier")

    @model_validator(mode="after")
    def validate_values(self) -> "ThresholdTriple":
        """Boundaries must be finite and elite must be non-zero."""
        for name in ("basic", "athletic", "elite"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} threshold must be a finite number")
        if self.elite == 0:
            raise ValueError("elite threshold must not be 0")
        return self

    def is_ordered(self, direction: Direction) -> bool:
        """Check the boundaries are strictly monotonic for a direction."""
        if direction is Direction.HIGHER_IS_BETTER:
            return self.basic < self.athletic < self.elite
        return self.basic > self.athletic > self.elite


class TestSpec(BaseModel):
    """Static metadata and standards for one test."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique test name", min_length=1)
    unit: Unit = Field(..., description="Unit the result is compared in")
    direction: Direction = Field(..., description="Comparison direction")
    computation: Computation = Field(
        default=Computation.ABSOLUTE, description="Absolute or bodyweight-relative"
    )
    note: str | None = Field(None, description="Short note shown next to the test")
    rule: str | None = Field(None, description="Movement standard for the test")
    thresholds: dict[str, dict[str, ThresholdTriple]] = Field(
        default_factory=dict,
        description="Threshold triples keyed by gender, then age bracket",
    )

    @model_validator(mode="after")
    def validate_consistency(self) -> "TestSpec":
        """Relative tests are multiples and every triple follows the direction."""
        if (self.computation is Computation.BODYWEIGHT_RELATIVE) != (
            self.unit is Unit.BODYWEIGHT_MULTIPLE
        ):
            raise ValueError(
                f"'{self.name}': bodyweight-relative computation requires unit "
                "'bodyweight-multiple' and vice versa"
            )
        for gender, brackets in self.thresholds.items():
            for bracket, triple in brackets.items():
                if not triple.is_ordered(self.direction):
                    raise ValueError(
                        f"'{self.name}' {gender}/{bracket}: thresholds are not "
                        f"strictly ordered for {self.direction.value}"
                    )
        return self

    def thresholds_for(self, gender: str, bracket: str) -> ThresholdTriple | None:
        """Get the triple for a gender and age bracket, or None on a miss."""
        return self.thresholds.get(gender, {}).get(bracket)


class ArchetypeConfig(BaseModel):
    """The two opposing domains compared by the archetype classifier."""

    model_config = ConfigDict(frozen=True)

    force_domain: str = Field(default="Strength", min_length=1)
    engine_domain: str = Field(default="Endurance", min_length=1)


class StandardsCatalog(BaseModel):
    """Read-only catalog of tests, domains and thresholds."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Catalog name", min_length=1)
    version: str = Field(default="1.0", description="Catalog version")
    description: str | None = Field(None, description="Catalog description")
    archetype: ArchetypeConfig = Field(default_factory=ArchetypeConfig)
    domains: dict[str, list[str]] = Field(
        ..., description="Domain name to ordered test names"
    )
    tests: dict[str, TestSpec] = Field(..., description="Test name to spec")

    @model_validator(mode="before")
    @classmethod
    def inject_test_names(cls, data: Any) -> Any:
        """Tests are keyed by name in YAML; copy the key into each spec."""
        if isinstance(data, dict) and isinstance(data.get("tests"), dict):
            tests = {}
            for name, spec in data["tests"].items():
                if isinstance(spec, dict):
                    spec = {**spec, "name": spec.get("name", name)}
                tests[name] = spec
            data = {**data, "tests": tests}
        return data

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        """Allow unquoted numeric versions such as ``1.0``."""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @model_validator(mode="after")
    def validate_references(self) -> "StandardsCatalog":
        """Domains and the archetype pair may only reference known names."""
        for name, spec in self.tests.items():
            if spec.name != name:
                raise ValueError(f"Test key '{name}' does not match name '{spec.name}'")
        for domain, test_names in self.domains.items():
            for test_name in test_names:
                if test_name not in self.tests:
                    raise ValueError(
                        f"Domain '{domain}' references unknown test '{test_name}'"
                    )
        for domain in (self.archetype.force_domain, self.archetype.engine_domain):
            if domain not in self.domains:
                raise ValueError(f"Archetype references unknown domain '{domain}'")
        return self

    def get(self, test_name: str) -> TestSpec | None:
        """Get a test spec by name."""
        return self.tests.get(test_name)

    def test_names(self) -> list[str]:
        """All test names in domain order, then tests outside every domain."""
        ordered: list[str] = []
        for test_names in self.domains.values():
            for test_name in test_names:
                if test_name not in ordered:
                    ordered.append(test_name)
        ordered.extend(name for name in self.tests if name not in ordered)
        return ordered

    def domain_of(self, test_name: str) -> str | None:
        """Name of the first domain listing a test."""
        for domain, test_names in self.domains.items():
            if test_name in test_names:
                return domain
        return None

    def thresholds(
        self, test_name: str, gender: str, bracket: str
    ) -> ThresholdTriple | None:
        """Look up a threshold triple; any miss returns None."""
        spec = self.tests.get(test_name)
        if spec is None:
            return None
        return spec.thresholds_for(gender, bracket)

    def genders(self) -> list[str]:
        """Gender keys present in any test, in first-seen order."""
        seen: list[str] = []
        for spec in self.tests.values():
            for gender in spec.thresholds:
                if gender not in seen:
                    seen.append(gender)
        return seen

    def brackets(self) -> list[str]:
        """Age brackets present in the catalog, in canonical order."""
        present = {
            bracket
            for spec in self.tests.values()
            for brackets in spec.thresholds.values()
            for bracket in brackets
        }
        return [bracket for bracket in AGE_BRACKETS if bracket in present]
