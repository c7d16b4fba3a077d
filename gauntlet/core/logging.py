"""Structured logging for Gauntlet.

Library modules log through the standard ``logging.getLogger(__name__)``;
``configure_logging`` routes those records through structlog so that the CLI
gets either a colored console stream or JSON lines.

Example usage:
    from gauntlet.core.logging import bind_context, configure_logging

    configure_logging(level="DEBUG")

    logger = logging.getLogger(__name__)

    with bind_context(gender="female", age_bracket="40-44"):
        logger.debug("No thresholds for %s", name)  # Includes both fields
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from gauntlet import __version__

# Context variable for additional bound context
_bound_context: ContextVar[dict[str, Any]] = ContextVar("bound_context", default={})


class bind_context:
    """Context manager to bind additional context to logs.

    Example:
        with bind_context(gender="female", age_bracket="40-44"):
            logger.debug("resolving")  # Includes gender and age_bracket
    """

    def __init__(self, **kwargs: Any) -> None:
        self.ctx = kwargs
        self._token: Any = None

    def __enter__(self) -> "bind_context":
        old_context = _bound_context.get().copy()
        self._token = _bound_context.set({**old_context, **self.ctx})
        return self

    def __exit__(self, *args: Any) -> None:
        _bound_context.reset(self._token)


def add_bound_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add bound context variables to log events."""
    for key, value in _bound_context.get().items():
        event_dict.setdefault(key, value)
    return event_dict


def add_common_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the package version to every event."""
    event_dict.setdefault("gauntlet_version", __version__)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_bound_context,
        add_common_fields,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: str | int = logging.INFO,
    json_output: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Use JSON output format. If None, JSON is used when
                     stderr is not a TTY.
        log_file: Optional file path for log output
    """
    if json_output is None:
        json_output = not sys.stderr.isatty()

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr so that JSON reports on stdout stay parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def reset_logging() -> None:
    """Reset logging configuration to defaults.

    Used by tests to keep state from leaking between cases.
    """
    _bound_context.set({})

    structlog.reset_defaults()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
