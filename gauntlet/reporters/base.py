"""Base reporter interface."""

from abc import ABC, abstractmethod

from gauntlet.scoring.models import ProfileReport


class Reporter(ABC):
    """Base class for reporters.

    Reporters format and output profile reports in various formats.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the reporter name."""

    @abstractmethod
    def report(self, report: ProfileReport) -> None:
        """Generate and output the report.

        Args:
            report: Profile report to output.
        """

    def _format_score(self, score: float | None) -> str:
        """Format score for display.

        Args:
            score: Score value (0-100).

        Returns:
            Formatted score string.
        """
        if score is None:
            return "N/A"
        return f"{score:.1f}/100"
