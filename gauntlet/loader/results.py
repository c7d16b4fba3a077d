"""Loader for results sheets: a profile plus raw per-test results."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from gauntlet.core.exceptions import ParseError, ResultsFileError
from gauntlet.loader.parser import YAMLParser

RawResult = float | str | None


class ResultsSheet(BaseModel):
    """Raw results as entered, keyed by test name.

    ``profile`` is partial on purpose: missing fields are filled from CLI
    options or settings by the caller.
    """

    profile: dict[str, Any] = Field(default_factory=dict)
    results: dict[str, RawResult] = Field(default_factory=dict)


class ResultsLoader:
    """Read results sheets from YAML.

    Example sheet::

        profile:
          gender: female
          age: 41
          bodyweight: 140
        results:
          Deadlift: 225
          5k Run: "24:30"
    """

    def __init__(self) -> None:
        self.parser = YAMLParser()

    def load_file(self, file_path: str | Path) -> ResultsSheet:
        """Load a results sheet from a file.

        Raises:
            ResultsFileError: If the file cannot be parsed or has the wrong shape
        """
        try:
            data = self.parser.parse_file(file_path)
        except ParseError as e:
            raise ResultsFileError(str(e)) from e
        return self._build(data, str(file_path))

    def load_string(self, content: str) -> ResultsSheet:
        """Load a results sheet from a YAML string."""
        try:
            data = self.parser.parse_string(content)
        except ParseError as e:
            raise ResultsFileError(str(e)) from e
        return self._build(data, "<string>")

    def _build(self, data: dict[str, Any], source: str) -> ResultsSheet:
        unknown = set(data) - {"profile", "results"}
        if unknown:
            raise ResultsFileError(
                f"{source}: unexpected top-level keys: {', '.join(sorted(unknown))}"
            )
        profile = data.get("profile") or {}
        results = data.get("results") or {}
        for key, section in (("profile", profile), ("results", results)):
            if not isinstance(section, dict):
                raise ResultsFileError(f"{source}: '{key}' must be a mapping")
        try:
            return ResultsSheet(
                profile=dict(profile),
                results={str(name): value for name, value in results.items()},
            )
        except PydanticValidationError as e:
            raise ResultsFileError(f"{source}: invalid results sheet: {e}") from e


def parse_inline_results(pairs: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` pairs given on the command line.

    Raises:
        ResultsFileError: If a pair has no ``=`` or an empty name
    """
    results: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise ResultsFileError(f"Invalid result '{pair}': expected NAME=VALUE")
        results[name.strip()] = value.strip()
    return results
