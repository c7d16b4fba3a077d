"""Reporter registry for managing and creating reporters."""

from pathlib import Path
from typing import Any

from .base import Reporter
from .console import ConsoleReporter
from .json_reporter import JSONReporter


class ReporterNotFoundError(Exception):
    """Raised when a reporter type is not registered."""

    def __init__(self, reporter_type: str) -> None:
        self.reporter_type = reporter_type
        super().__init__(f"Reporter type not found: {reporter_type}")


class ReporterRegistry:
    """Registry for reporter types.

    Provides factory methods for creating reporters from configuration.
    """

    def __init__(self) -> None:
        """Initialize the registry with built-in reporters."""
        self._reporters: dict[str, type[Reporter]] = {}

        self.register("console", ConsoleReporter)
        self.register("json", JSONReporter)

    def register(self, reporter_type: str, reporter_class: type[Reporter]) -> None:
        """Register a reporter type."""
        self._reporters[reporter_type] = reporter_class

    def get_reporter_class(self, reporter_type: str) -> type[Reporter]:
        """Get the reporter class for a type.

        Raises:
            ReporterNotFoundError: If reporter type is not registered.
        """
        if reporter_type not in self._reporters:
            raise ReporterNotFoundError(reporter_type)
        return self._reporters[reporter_type]

    def create(
        self, reporter_type: str, config: dict[str, Any] | None = None
    ) -> Reporter:
        """Create a reporter instance.

        Args:
            reporter_type: Reporter type identifier.
            config: Optional configuration for the reporter.

        Returns:
            Configured reporter instance.

        Raises:
            ReporterNotFoundError: If reporter type is not registered.
        """
        reporter_class = self.get_reporter_class(reporter_type)
        config = config or {}

        if reporter_type == "console":
            return ConsoleReporter(
                output=config.get("output"),
                use_colors=config.get("use_colors", True),
                verbose=config.get("verbose", False),
            )
        elif reporter_type == "json":
            output_file = config.get("output_file")
            if output_file:
                output_file = Path(output_file)
            return JSONReporter(
                output_file=output_file,
                output=config.get("output"),
                indent=config.get("indent", 2),
                include_thresholds=config.get("include_thresholds", True),
            )
        else:
            return reporter_class()


_default_registry: ReporterRegistry | None = None


def get_registry() -> ReporterRegistry:
    """Get the global reporter registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ReporterRegistry()
    return _default_registry


def create_reporter(
    reporter_type: str, config: dict[str, Any] | None = None
) -> Reporter:
    """Create a reporter using the global registry."""
    return get_registry().create(reporter_type, config)
