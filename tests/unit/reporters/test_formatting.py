"""Tests for value and threshold formatting."""

import math

import pytest

from gauntlet.loader.models import Unit
from gauntlet.reporters.formatting import (
    MISSING,
    UNIT_LABELS,
    format_standard,
    format_value,
    parse_value,
)


class TestFormatValue:
    """Display of normalized values."""

    @pytest.mark.parametrize(
        ("unit", "value", "expected"),
        [
            (Unit.BODYWEIGHT_MULTIPLE, 1.5, "1.50x"),
            (Unit.BODYWEIGHT_MULTIPLE, 2, "2.00x"),
            (Unit.SECONDS, 585, "9:45"),
            (Unit.SECONDS, 45, "45s"),
            (Unit.SECONDS, 59.9, "59s"),
            (Unit.SECONDS, 60, "1:00"),
            (Unit.FEET, 8.25, "8.2ft"),
            (Unit.FEET, 9, "9.0ft"),
            (Unit.METERS, 120, "120m"),
            (Unit.METERS, 2000.5, "2000.5m"),
            (Unit.REPS, 12, "12"),
            (Unit.REPS, 12.0, "12"),
            (Unit.REPS, 7.5, "7.5"),
            (Unit.REPS, 7.25, "7.25"),
        ],
    )
    def test_format(self, unit: Unit, value: float, expected: str) -> None:
        assert format_value(unit, value) == expected

    @pytest.mark.parametrize("value", [None, math.nan, math.inf])
    def test_missing(self, value: float | None) -> None:
        for unit in Unit:
            assert format_value(unit, value) == MISSING


class TestParseValue:
    """Reading displayed values back."""

    @pytest.mark.parametrize(
        ("unit", "text", "expected"),
        [
            (Unit.SECONDS, "9:45", 585.0),
            (Unit.SECONDS, "45s", 45.0),
            (Unit.BODYWEIGHT_MULTIPLE, "1.50x", 1.5),
            (Unit.BODYWEIGHT_MULTIPLE, "1.50x BW", 1.5),
            (Unit.FEET, "8.5ft", 8.5),
            (Unit.METERS, "120m", 120.0),
            (Unit.REPS, " 12 ", 12.0),
        ],
    )
    def test_parse(self, unit: Unit, text: str, expected: float) -> None:
        assert parse_value(unit, text) == expected

    @pytest.mark.parametrize("text", ["", "-", "abc", "9:75"])
    def test_unparseable(self, text: str) -> None:
        assert parse_value(Unit.SECONDS, text) is None

    @pytest.mark.parametrize(
        ("unit", "value"),
        [
            (Unit.SECONDS, 585),
            (Unit.SECONDS, 45),
            (Unit.BODYWEIGHT_MULTIPLE, 1.437),
            (Unit.FEET, 8.25),
            (Unit.METERS, 120.4),
            (Unit.REPS, 7.5),
        ],
    )
    def test_formatted_string_is_fixed_point(self, unit: Unit, value: float) -> None:
        """Formatting a parsed display string reproduces it."""
        shown = format_value(unit, value)
        assert format_value(unit, parse_value(unit, shown)) == shown

    @pytest.mark.parametrize(
        ("unit", "text"),
        [
            (Unit.SECONDS, "9:45"),
            (Unit.SECONDS, "45s"),
            (Unit.BODYWEIGHT_MULTIPLE, "1.43x"),
            (Unit.FEET, "8.5ft"),
            (Unit.METERS, "2000.5m"),
            (Unit.METERS, "120m"),
            (Unit.REPS, "7.25"),
            (Unit.REPS, "12"),
        ],
    )
    def test_parse_format_parse_is_stable(self, unit: Unit, text: str) -> None:
        """A value read from its display form survives another round trip."""
        value = parse_value(unit, text)
        assert value is not None
        assert parse_value(unit, format_value(unit, value)) == value

    def test_every_unit_round_trips(self) -> None:
        samples = {
            Unit.SECONDS: "9:45",
            Unit.BODYWEIGHT_MULTIPLE: "1.50x",
            Unit.FEET: "8.5ft",
            Unit.METERS: "2000.5m",
            Unit.REPS: "7.25",
        }
        assert set(samples) == set(Unit)
        for unit, text in samples.items():
            value = parse_value(unit, text)
            assert parse_value(unit, format_value(unit, value)) == value


class TestFormatStandard:
    """Threshold cells of the standards table."""

    @pytest.mark.parametrize(
        ("unit", "value", "expected"),
        [
            (Unit.BODYWEIGHT_MULTIPLE, 1.5, "1.50x BW"),
            (Unit.SECONDS, 45, "0:45"),
            (Unit.SECONDS, 1800, "30:00"),
            (Unit.FEET, 8, "8.0 ft"),
            (Unit.METERS, 100, "100 m"),
            (Unit.METERS, 20.5, "20.5 m"),
            (Unit.REPS, 20, "20"),
        ],
    )
    def test_cells(self, unit: Unit, value: float, expected: str) -> None:
        assert format_standard(unit, value) == expected

    def test_every_unit_labelled(self) -> None:
        assert set(UNIT_LABELS) == set(Unit)
