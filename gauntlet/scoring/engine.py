"""Scoring facade: raw results and a profile in, a full report out."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gauntlet.core.logging import bind_context
from gauntlet.loader.loader import StandardsLoader
from gauntlet.loader.models import StandardsCatalog
from gauntlet.scoring.aggregator import aggregate
from gauntlet.scoring.archetype import interpret
from gauntlet.scoring.calculator import calculate_score, classify_tier
from gauntlet.scoring.models import Profile, ProfileReport, TestScore, Tier
from gauntlet.scoring.thresholds import age_bracket, resolve_thresholds
from gauntlet.scoring.units import as_number, normalize

logger = logging.getLogger(__name__)


def _recorded_raw(raw: Any) -> float | str | None:
    # Booleans and ints beyond float range are not kept
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        return None
    if isinstance(raw, int) and as_number(raw) is None:
        return None
    return raw


class GauntletScorer:
    """
    Runs the scoring pipeline for one catalog.

    For each test: normalize the raw value, resolve the thresholds for the
    profile, then compute score and tier. Scores of attempted tests are
    aggregated per domain and interpreted into an archetype and status.

    The scorer holds no state besides the catalog; every call is a pure
    function of its arguments.
    """

    def __init__(self, catalog: StandardsCatalog) -> None:
        self.catalog = catalog

    @classmethod
    def from_file(cls, path: str | Path) -> "GauntletScorer":
        """Create a scorer from a catalog file."""
        return cls(StandardsLoader().load_file(path))

    @classmethod
    def default(cls) -> "GauntletScorer":
        """Create a scorer for the bundled catalog."""
        return cls(StandardsLoader().load_default())

    def score_test(
        self,
        test_name: str,
        raw: Any,
        profile: Profile,
        bracket: str | None = None,
    ) -> TestScore:
        """
        Score a single raw result.

        Args:
            test_name: Name of the test in the catalog.
            raw: Raw result as entered (number, time string or None).
            profile: Demographics to score against.
            bracket: Pre-computed age bracket, derived from the profile if None.

        Returns:
            TestScore; unknown tests score 0 in tier below.
        """
        spec = self.catalog.get(test_name)
        raw_value = _recorded_raw(raw)
        if spec is None:
            logger.debug("Unknown test %s", test_name)
            return TestScore(
                test_name=test_name, raw=raw_value, score=0.0, tier=Tier.BELOW
            )

        if bracket is None:
            bracket = age_bracket(profile.age)

        value = normalize(spec, raw, profile.bodyweight)
        thresholds = resolve_thresholds(
            self.catalog, test_name, profile.gender, bracket
        )

        return TestScore(
            test_name=test_name,
            unit=spec.unit,
            raw=raw_value,
            value=value,
            score=calculate_score(value, thresholds, spec.direction),
            tier=classify_tier(value, thresholds, spec.direction),
            thresholds=thresholds,
        )

    def score_all(
        self, results: Mapping[str, Any], profile: Profile
    ) -> list[TestScore]:
        """Score every catalog test in catalog order; missing results are absent."""
        bracket = age_bracket(profile.age)
        return [
            self.score_test(name, results.get(name), profile, bracket)
            for name in self.catalog.test_names()
        ]

    def evaluate(self, results: Mapping[str, Any], profile: Profile) -> ProfileReport:
        """
        Evaluate a full set of raw results.

        Result names missing from the catalog are skipped and listed in
        ``unknown_tests``.

        Args:
            results: Test name to raw result.
            profile: Demographics to score against.

        Returns:
            ProfileReport with per-test scores, aggregate and interpretation.
        """
        bracket = age_bracket(profile.age)
        with bind_context(
            catalog=self.catalog.name, gender=profile.gender, age_bracket=bracket
        ):
            unknown = [name for name in results if self.catalog.get(name) is None]
            if unknown:
                logger.warning(
                    "Ignoring results for unknown tests: %s", ", ".join(unknown)
                )

            tests = self.score_all(results, profile)
            attempted = {t.test_name: t.score for t in tests if t.attempted}
            profile_aggregate = aggregate(attempted, self.catalog.domains)
            interpretation = interpret(profile_aggregate, self.catalog.archetype)

            logger.debug(
                "Profile evaluated: overall=%.2f completed=%d/%d "
                "archetype=%s status=%s",
                profile_aggregate.overall,
                profile_aggregate.completed,
                profile_aggregate.total,
                interpretation.archetype.value,
                interpretation.status.value,
            )

        return ProfileReport(
            catalog_name=self.catalog.name,
            profile=profile,
            age_bracket=bracket,
            tests=tests,
            aggregate=profile_aggregate,
            interpretation=interpretation,
            unknown_tests=unknown,
        )
