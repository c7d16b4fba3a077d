"""JSON reporter for machine-readable output."""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from gauntlet.reporters.base import Reporter
from gauntlet.reporters.formatting import format_value
from gauntlet.scoring.archetype import display_score
from gauntlet.scoring.models import ProfileReport, TestScore


class JSONReporter(Reporter):
    """Reporter that outputs profile reports in JSON format.

    Produces a stable, versioned JSON document suitable for automated
    processing.
    """

    # JSON format version for compatibility tracking
    FORMAT_VERSION = "1.0"

    def __init__(
        self,
        output_file: Path | str | None = None,
        output: TextIO | None = None,
        indent: int | None = 2,
        include_thresholds: bool = True,
    ) -> None:
        """Initialize the JSON reporter.

        Args:
            output_file: Path to write JSON file (takes precedence over output).
            output: Output stream (defaults to sys.stdout if no file specified).
            indent: JSON indentation level (None for compact output).
            include_thresholds: Whether to include the thresholds per test.
        """
        self._output_file = Path(output_file) if output_file else None
        self._output = output
        self._indent = indent
        self._include_thresholds = include_thresholds

    @property
    def name(self) -> str:
        """Return the reporter name."""
        return "json"

    def report(self, report: ProfileReport) -> None:
        """Generate and output the JSON report.

        Args:
            report: Profile report to output.
        """
        json_data = self._build_json(report)
        json_str = json.dumps(json_data, indent=self._indent, default=str)

        if self._output_file:
            self._output_file.parent.mkdir(parents=True, exist_ok=True)
            self._output_file.write_text(json_str + "\n")
        else:
            output = self._output or sys.stdout
            output.write(json_str + "\n")

    def _build_json(self, report: ProfileReport) -> dict[str, Any]:
        """Build the JSON structure from the report."""
        return {
            "version": self.FORMAT_VERSION,
            "generated_at": datetime.now().isoformat(),
            "catalog": report.catalog_name,
            "profile": {
                **report.profile.model_dump(),
                "age_bracket": report.age_bracket,
            },
            "summary": self._build_summary(report),
            "domains": {
                name: {
                    "average": round(summary.average, 2),
                    "completed": summary.completed,
                    "total": summary.total,
                    "tests": list(summary.tests),
                }
                for name, summary in report.aggregate.domains.items()
            },
            "tests": [self._build_test(test) for test in report.tests],
            "unknown_tests": list(report.unknown_tests),
        }

    def _build_summary(self, report: ProfileReport) -> dict[str, Any]:
        aggregate = report.aggregate
        return {
            "overall": round(aggregate.overall, 2),
            "overall_display": display_score(aggregate.overall),
            "completed": aggregate.completed,
            "total": aggregate.total,
            **report.interpretation.to_dict(),
        }

    def _build_test(self, test: TestScore) -> dict[str, Any]:
        result: dict[str, Any] = {
            "test_name": test.test_name,
            "unit": test.unit.value if test.unit else None,
            "raw": test.raw,
            "value": test.value,
            "display": format_value(test.unit, test.value) if test.unit else None,
            "score": round(test.score, 2),
            "tier": test.tier.value,
            "attempted": test.attempted,
        }

        if self._include_thresholds:
            result["thresholds"] = (
                test.thresholds.model_dump() if test.thresholds else None
            )

        return result
