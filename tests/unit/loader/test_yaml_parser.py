"""Unit tests for the YAML parser and variable substitution."""

from pathlib import Path

import pytest

from gauntlet.core.exceptions import ParseError, ValidationError
from gauntlet.loader.parser import VariableSubstitution, YAMLParser


class TestYAMLParser:
    """Test YAML parser functionality."""

    def test_parse_string(self) -> None:
        """Mappings, quoted keys and flow mappings are parsed."""
        result = YAMLParser().parse_string(
            'name: Mini\ntests:\n  Run:\n    "35-39": {basic: 720, elite: 480}\n'
        )

        assert result["name"] == "Mini"
        assert result["tests"]["Run"]["35-39"]["basic"] == 720

    def test_empty_content(self) -> None:
        with pytest.raises(ParseError, match="Empty YAML content"):
            YAMLParser().parse_string("")

    def test_invalid_yaml_reports_line(self) -> None:
        """Syntax errors carry the line and column."""
        with pytest.raises(ParseError, match="YAML parsing error at line"):
            YAMLParser().parse_string("domains:\n  Strength: [Lift\ntests: {}\n")

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(ParseError, match="mapping"):
            YAMLParser().parse_string("- Lift\n- Run\n")

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="File not found"):
            YAMLParser().parse_file(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("# nothing here\n")

        with pytest.raises(ParseError, match="Empty YAML file"):
            YAMLParser().parse_file(path)

    def test_broken_fixture(self, standards_dir: Path) -> None:
        """Errors in files also report the location."""
        with pytest.raises(ParseError, match="YAML parsing error"):
            YAMLParser().parse_file(standards_dir / "broken.yaml")


class TestVariableSubstitution:
    """Test ${VAR} substitution."""

    def test_substitutes_nested_strings(self) -> None:
        """Variables are replaced inside dicts and lists; other values pass."""
        substitution = VariableSubstitution(env={"NAME": "Lift", "DOMAIN": "Strength"})
        data = {
            "name": "${NAME}",
            "domains": {"${DOMAIN}": ["${NAME}", "Run"]},
            "elite": 2.0,
        }

        result = substitution.substitute(data)

        assert result == {
            "name": "Lift",
            "domains": {"${DOMAIN}": ["Lift", "Run"]},
            "elite": 2.0,
        }

    def test_default_value(self) -> None:
        substitution = VariableSubstitution(env={})
        assert substitution.substitute("v${VERSION:1.0}") == "v1.0"

    def test_environment_beats_default(self) -> None:
        substitution = VariableSubstitution(env={"VERSION": "2.1"})
        assert substitution.substitute("${VERSION:1.0}") == "2.1"

    def test_missing_variable(self) -> None:
        """A variable without default must be set."""
        with pytest.raises(ValidationError, match="CATALOG_NAME"):
            VariableSubstitution(env={}).substitute("${CATALOG_NAME}")

    def test_lowercase_is_not_a_variable(self) -> None:
        substitution = VariableSubstitution(env={})
        assert substitution.substitute("${lower}") == "${lower}"
