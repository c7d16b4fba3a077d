"""Console reporter for terminal output."""

import sys
from io import StringIO
from typing import TextIO

from gauntlet.loader.models import StandardsCatalog
from gauntlet.reporters.base import Reporter
from gauntlet.reporters.formatting import (
    UNIT_LABELS,
    format_standard,
    format_value,
)
from gauntlet.scoring.archetype import display_score
from gauntlet.scoring.models import DomainSummary, ProfileReport, TestScore, Tier


class ConsoleReporter(Reporter):
    """Reporter that outputs profile reports to the terminal.

    Provides human-readable output with optional color support and
    verbosity levels. Also renders the standards table and movement rules
    of a catalog.
    """

    TIER_MARKERS = {
        Tier.ELITE: "**",
        Tier.ATHLETIC: "*",
        Tier.BASIC: "+",
        Tier.BELOW: "x",
    }

    def __init__(
        self,
        output: TextIO | None = None,
        use_colors: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialize the console reporter.

        Args:
            output: Output stream (defaults to sys.stdout).
            use_colors: Whether to use ANSI color codes.
            verbose: Whether to show thresholds and raw input per test.
        """
        self._output = output or sys.stdout
        self._use_colors = use_colors and self._supports_color()
        self._verbose = verbose

    @property
    def name(self) -> str:
        """Return the reporter name."""
        return "console"

    def _supports_color(self) -> bool:
        """Check if the output stream supports ANSI colors."""
        if isinstance(self._output, StringIO):
            return True
        if not hasattr(self._output, "isatty"):
            return False
        return self._output.isatty()

    def _color(self, text: str, color_code: str) -> str:
        """Apply ANSI color to text if colors are enabled."""
        if not self._use_colors:
            return text
        return f"\033[{color_code}m{text}\033[0m"

    def _green(self, text: str) -> str:
        return self._color(text, "32")

    def _red(self, text: str) -> str:
        return self._color(text, "31")

    def _yellow(self, text: str) -> str:
        return self._color(text, "33")

    def _bold(self, text: str) -> str:
        return self._color(text, "1")

    def _dim(self, text: str) -> str:
        return self._color(text, "2")

    def _write(self, text: str = "") -> None:
        self._output.write(text + "\n")

    def _tier(self, tier: Tier) -> str:
        """Colorize a tier label."""
        if tier is Tier.ELITE:
            return self._bold(self._green(tier.value))
        if tier is Tier.ATHLETIC:
            return self._green(tier.value)
        if tier is Tier.BASIC:
            return self._yellow(tier.value)
        return self._red(tier.value)

    def report(self, report: ProfileReport) -> None:
        """Generate and output the console report.

        Args:
            report: Profile report to output.
        """
        self._write_header(report)
        self._write()
        for summary in report.aggregate.domains.values():
            self._write_domain(report, summary)
            self._write()
        self._write_summary(report)

    def _write_header(self, report: ProfileReport) -> None:
        profile = report.profile
        self._write(self._bold(f"{report.catalog_name}: Profile Report"))
        self._write("=" * 50)
        self._write()

        bracket = report.age_bracket or "no bracket"
        line = f"Profile: {profile.gender}, age {profile.age} ({bracket})"
        if profile.bodyweight is not None:
            line += f", bodyweight {profile.bodyweight:g} lbs"
        self._write(line)

    def _write_domain(self, report: ProfileReport, summary: DomainSummary) -> None:
        """Write one domain card: its average, completion and tests."""
        progress = f"[{summary.completed}/{summary.total}]"
        self._write(
            f"{self._bold(summary.name):<20} {progress:>7}  "
            f"avg {self._format_score(summary.average)}"
        )
        for test_name in summary.tests:
            test = report.get(test_name)
            if test is not None:
                self._write_test(test)

    def _write_test(self, test: TestScore) -> None:
        name_part = f"{test.test_name:<16}"

        if not test.attempted:
            self._write(self._dim(f"  - {name_part} {'-':>8}  not attempted"))
            return

        marker = self.TIER_MARKERS[test.tier]
        value = format_value(test.unit, test.value) if test.unit else "-"
        line = (
            f"  {marker:<2}{name_part} {value:>8}  "
            f"{self._format_score(test.score):>9}  {self._tier(test.tier)}"
        )
        if not test.scoreable:
            line += self._dim(" (no standard for this profile)")
        self._write(line)

        if self._verbose:
            self._write_test_details(test)

    def _write_test_details(self, test: TestScore) -> None:
        """Write raw input and thresholds of a test."""
        self._write(self._dim(f"      raw: {test.raw}"))
        if test.thresholds and test.unit:
            t = test.thresholds
            cells = " / ".join(
                f"{label} {format_standard(test.unit, value)}"
                for label, value in (
                    ("basic", t.basic),
                    ("athletic", t.athletic),
                    ("elite", t.elite),
                )
            )
            self._write(self._dim(f"      standards: {cells}"))

    def _write_summary(self, report: ProfileReport) -> None:
        aggregate = report.aggregate
        interpretation = report.interpretation

        overall = display_score(aggregate.overall)
        self._write(
            self._bold(f"Overall score: {overall}/100")
            + f" ({aggregate.completed}/{aggregate.total} tests completed)"
        )
        self._write(f"Archetype: {interpretation.archetype.label}")
        self._write(f"Status: {self._bold(interpretation.status.label)}")
        self._write(f"  {interpretation.status.narrative}")

        if report.unknown_tests:
            self._write()
            ignored = ", ".join(report.unknown_tests)
            self._write(self._yellow(f"Ignored unknown tests: {ignored}"))

    def report_standards(
        self, catalog: StandardsCatalog, gender: str, bracket: str
    ) -> None:
        """Write the reference table for one gender and age bracket.

        Args:
            catalog: Standards catalog.
            gender: Gender key.
            bracket: Age bracket key.
        """
        self._write(self._bold(f"{catalog.name}: standards ({gender}, {bracket})"))
        self._write("=" * 50)

        header = (
            f"{'Test':<16} {'Unit':<6} {'Basic':>10} {'Athletic':>10} {'Elite':>10}"
        )
        for domain, test_names in catalog.domains.items():
            self._write()
            self._write(self._bold(domain))
            self._write(self._dim(header))
            for test_name in test_names:
                spec = catalog.tests[test_name]
                label = UNIT_LABELS[spec.unit]
                triple = spec.thresholds_for(gender, bracket)
                if triple is None:
                    missing = self._dim("no standard")
                    self._write(f"{test_name:<16} {label:<6} {missing}")
                    continue
                self._write(
                    f"{test_name:<16} {label:<6} "
                    f"{format_standard(spec.unit, triple.basic):>10} "
                    f"{format_standard(spec.unit, triple.athletic):>10} "
                    f"{format_standard(spec.unit, triple.elite):>10}"
                )
                if spec.note:
                    self._write(self._dim(f"  {spec.note}"))

    def report_rules(self, catalog: StandardsCatalog) -> None:
        """Write the movement standard of every test."""
        self._write(self._bold(f"{catalog.name}: movement standards"))
        self._write("=" * 50)
        for test_name in catalog.test_names():
            spec = catalog.tests[test_name]
            self._write(f"{self._bold(test_name)}: {spec.rule or 'No rule defined.'}")
