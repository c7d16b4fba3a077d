"""Aggregation of per-test scores into domain and overall scores."""

from collections.abc import Mapping

from gauntlet.scoring.models import DomainSummary, ProfileAggregate


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def aggregate(
    test_scores: Mapping[str, float | None],
    domains: Mapping[str, list[str]],
) -> ProfileAggregate:
    """Aggregate per-test scores.

    A test counts as completed when it has a score, including an explicit
    zero. Missing keys and ``None`` scores are not attempted and do not pull
    averages down.

    Args:
        test_scores: Test name to score of attempted tests.
        domains: Domain name to its ordered test names.

    Returns:
        ProfileAggregate with per-domain averages and the overall mean of
        completed tests belonging to at least one domain, each counted once.
    """
    summaries: dict[str, DomainSummary] = {}
    counted: dict[str, float] = {}
    total_tests: set[str] = set()

    for domain, test_names in domains.items():
        completed: list[float] = []
        for test_name in test_names:
            total_tests.add(test_name)
            score = test_scores.get(test_name)
            if score is None:
                continue
            completed.append(score)
            counted.setdefault(test_name, score)

        summaries[domain] = DomainSummary(
            name=domain,
            average=_mean(completed),
            completed=len(completed),
            total=len(test_names),
            tests=list(test_names),
        )

    return ProfileAggregate(
        domains=summaries,
        overall=_mean(list(counted.values())),
        completed=len(counted),
        total=len(total_tests),
    )
