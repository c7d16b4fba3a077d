"""YAML parser with ruamel.yaml for line number tracking."""

import os
import re
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError

from gauntlet.core.exceptions import ParseError, ValidationError


class YAMLParser:
    """YAML parser that reports problem locations."""

    def __init__(self) -> None:
        self.yaml = YAML(typ="rt")
        self.yaml.preserve_quotes = True

    def parse_file(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML mapping from a file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ParseError: If the file is missing, empty or not valid YAML
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = self.yaml.load(f)
        except MarkedYAMLError as e:
            raise self._marked_error(e) from e
        except OSError as e:
            raise ParseError(f"Failed to read YAML file {file_path}: {e}") from e

        if data is None:
            raise ParseError(f"Empty YAML file: {file_path}")
        return self._require_mapping(data)

    def parse_string(self, content: str) -> dict[str, Any]:
        """Parse a YAML mapping from a string.

        Raises:
            ParseError: If YAML parsing fails or the content is empty
        """
        try:
            data = self.yaml.load(content)
        except MarkedYAMLError as e:
            raise self._marked_error(e) from e

        if data is None:
            raise ParseError("Empty YAML content")
        return self._require_mapping(data)

    def _marked_error(self, error: MarkedYAMLError) -> ParseError:
        mark = error.problem_mark
        line = mark.line + 1 if mark else None
        column = mark.column + 1 if mark else None
        return ParseError(
            f"YAML parsing error at line {line}, column {column}: {error.problem}"
        )

    def _require_mapping(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a YAML mapping at the top level, got {type(data).__name__}"
            )
        return data


class VariableSubstitution:
    """Substitute ${VAR} and ${VAR:default} references in string values."""

    VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*?)(?::([^}]*))?\}")

    def __init__(self, env: dict[str, str] | None = None):
        """Initialize with environment variables.

        Args:
            env: Custom environment dict, defaults to os.environ
        """
        self.env = env if env is not None else dict(os.environ)

    def substitute(self, data: Any) -> Any:
        """Recursively substitute variables in a data structure.

        Raises:
            ValidationError: If a variable without default is not set
        """
        if isinstance(data, dict):
            return {key: self.substitute(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self.substitute(item) for item in data]
        elif isinstance(data, str):
            return self._substitute_string(data)
        else:
            return data

    def _substitute_string(self, text: str) -> str:
        def replacer(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2)

            if var_name in self.env:
                return self.env[var_name]
            elif default_value is not None:
                return default_value
            else:
                raise ValidationError(
                    f"Required environment variable not found: {var_name}"
                )

        return self.VAR_PATTERN.sub(replacer, text)
