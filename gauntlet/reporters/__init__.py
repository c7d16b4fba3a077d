"""Reporters for profile reports, standards tables and movement rules."""

from .base import Reporter
from .console import ConsoleReporter
from .formatting import format_standard, format_value, parse_value
from .json_reporter import JSONReporter
from .registry import (
    ReporterNotFoundError,
    ReporterRegistry,
    create_reporter,
    get_registry,
)

__all__ = [
    "Reporter",
    "ConsoleReporter",
    "JSONReporter",
    "ReporterRegistry",
    "ReporterNotFoundError",
    "create_reporter",
    "format_standard",
    "format_value",
    "get_registry",
    "parse_value",
]
