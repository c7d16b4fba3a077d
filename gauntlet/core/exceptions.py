"""Gauntlet exceptions.

Scoring itself never raises: absent or malformed results degrade to a zero
score. Exceptions are reserved for loading configuration and input files.
"""


class GauntletError(Exception):
    """Base exception for all Gauntlet errors."""


class LoaderError(GauntletError):
    """Base exception for standards and results loading errors."""


class ValidationError(LoaderError):
    """Validation error with location information.

    ``errors`` keeps the individual problems when several were collected
    before raising.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        file_path: str | None = None,
        errors: list[str] | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.file_path = file_path
        self.errors = list(errors) if errors else [message]

        location_parts = []
        if file_path:
            location_parts.append(f"File: {file_path}")
        if line is not None:
            location_parts.append(f"Line: {line}")
        if column is not None:
            location_parts.append(f"Column: {column}")

        if location_parts:
            full_message = f"{', '.join(location_parts)}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


class ParseError(LoaderError):
    """YAML parsing error."""


class ResultsFileError(LoaderError):
    """A results file could not be read or has the wrong shape."""
