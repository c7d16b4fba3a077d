"""Unit tests for results sheets."""

from pathlib import Path

import pytest

from gauntlet.core.exceptions import ResultsFileError
from gauntlet.loader.results import ResultsLoader, parse_inline_results


class TestResultsLoader:
    """Tests for ResultsLoader."""

    def test_load_file(self, tmp_path: Path) -> None:
        """Numbers and time strings are kept as entered."""
        path = tmp_path / "me.yaml"
        path.write_text(
            "profile:\n"
            "  gender: female\n"
            "  age: 41\n"
            "results:\n"
            "  Deadlift: 225\n"
            '  5k Run: "24:30"\n'
            "  Plank:\n"
        )

        sheet = ResultsLoader().load_file(path)

        assert sheet.profile == {"gender": "female", "age": 41}
        assert sheet.results == {"Deadlift": 225.0, "5k Run": "24:30", "Plank": None}

    def test_unquoted_time_is_string(self) -> None:
        """YAML 1.2 keeps M:SS as a string."""
        sheet = ResultsLoader().load_string("results:\n  Grace: 4:10\n")
        assert sheet.results["Grace"] == "4:10"

    def test_sections_optional(self) -> None:
        sheet = ResultsLoader().load_string("results:\n  Pull-Ups: 12\n")
        assert sheet.profile == {}
        assert sheet.results == {"Pull-Ups": 12.0}

    def test_unexpected_keys(self) -> None:
        with pytest.raises(ResultsFileError, match="unexpected top-level keys: notes"):
            ResultsLoader().load_string("notes: hi\nresults: {}\n")

    def test_results_must_be_mapping(self) -> None:
        with pytest.raises(ResultsFileError, match="'results' must be a mapping"):
            ResultsLoader().load_string("results:\n  - 12\n")

    def test_parse_error_wrapped(self, tmp_path: Path) -> None:
        with pytest.raises(ResultsFileError, match="File not found"):
            ResultsLoader().load_file(tmp_path / "missing.yaml")

    def test_invalid_value(self) -> None:
        """Nested values are not results."""
        with pytest.raises(ResultsFileError, match="invalid results sheet"):
            ResultsLoader().load_string("results:\n  Deadlift: {lbs: 225}\n")


class TestParseInlineResults:
    """Tests for NAME=VALUE parsing."""

    def test_pairs(self) -> None:
        assert parse_inline_results(["Deadlift=315", " 5k Run = 24:30 "]) == {
            "Deadlift": "315",
            "5k Run": "24:30",
        }

    def test_value_may_contain_equals(self) -> None:
        assert parse_inline_results(["Note=a=b"]) == {"Note": "a=b"}

    def test_empty_value_kept(self) -> None:
        assert parse_inline_results(["Plank="]) == {"Plank": ""}

    @pytest.mark.parametrize("pair", ["Deadlift", "=315"])
    def test_invalid_pair(self, pair: str) -> None:
        with pytest.raises(ResultsFileError, match="expected NAME=VALUE"):
            parse_inline_results([pair])
