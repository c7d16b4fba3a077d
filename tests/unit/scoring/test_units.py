"""Tests for unit normalization and time formatting."""

import math
import re

import pytest

from gauntlet.loader.models import Computation, Direction, TestSpec, Unit
from gauntlet.scoring.units import (
    UNIT_NORMALIZERS,
    as_number,
    bodyweight_multiple,
    format_time,
    format_time_entry,
    normalize,
    parse_time,
)


def make_spec(
    unit: Unit,
    direction: Direction = Direction.HIGHER_IS_BETTER,
    computation: Computation = Computation.ABSOLUTE,
) -> TestSpec:
    return TestSpec(
        name=f"{unit.value} test",
        unit=unit,
        direction=direction,
        computation=computation,
    )


LIFT = make_spec(Unit.BODYWEIGHT_MULTIPLE, computation=Computation.BODYWEIGHT_RELATIVE)
RUN = make_spec(Unit.SECONDS, direction=Direction.LOWER_IS_BETTER)
PULLS = make_spec(Unit.REPS)
JUMP = make_spec(Unit.FEET)


class TestAsNumber:
    """Numeric coercion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12, 12.0), (8.5, 8.5), (" 7.25 ", 7.25), ("0", 0.0), (-3, -3.0)],
    )
    def test_numbers(self, value: object, expected: float) -> None:
        assert as_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "abc", "1:30", True, False, math.nan, math.inf, "inf", "nan", [1]],
    )
    def test_not_numbers(self, value: object) -> None:
        assert as_number(value) is None

    def test_int_too_large_for_float(self) -> None:
        assert as_number(10**400) is None
        assert as_number(-(10**400)) is None

    def test_string_overflowing_to_infinity(self) -> None:
        assert as_number("1e400") is None


class TestParseTime:
    """Parsing of M:SS."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("9:45", 585),
            ("09:45", 585),
            ("0:00", 0),
            ("99:59", 5999),
            (" 24:30 ", 1470),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_time(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["9:75", "9:60", "9:5", "100:00", "1:2:3", "a:bc", "-1:30", "930", "", ":45"],
    )
    def test_invalid(self, text: str) -> None:
        assert parse_time(text) is None

    def test_non_string(self) -> None:
        assert parse_time(585) is None
        assert parse_time(None) is None


class TestFormatTime:
    """Formatting of seconds as M:SS."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(585, "9:45"), (0, "0:00"), (59.9, "0:59"), (3600, "60:00"), (5999, "99:59")],
    )
    def test_format(self, seconds: float, expected: str) -> None:
        assert format_time(seconds) == expected

    @pytest.mark.parametrize("seconds", [None, -1, math.nan, math.inf])
    def test_degenerate(self, seconds: object) -> None:
        assert format_time(seconds) == "0:00"

    def test_round_trip(self) -> None:
        """parse_time inverts format_time below 100 minutes."""
        pattern = re.compile(r"^\d+:\d{2}$")
        for seconds in range(6000):
            text = format_time(seconds)
            assert pattern.match(text)
            assert parse_time(text) == seconds


class TestFormatTimeEntry:
    """Incremental formatting of typed times."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", ""),
            ("9", "9"),
            ("94", "94:00"),
            ("945", "94:05"),
            ("0945", "9:45"),
            ("9:45", "9:45"),
            ("9:7", "9:07"),
            ("1:", "1:00"),
            ("12:75", "12:59"),
            ("150:30", "99:30"),
            ("12345", "12:59"),
            ("9m 45s", "94:05"),
            ("1:2:3", "1:2:3"),
        ],
    )
    def test_format(self, text: str, expected: str) -> None:
        assert format_time_entry(text) == expected

    @pytest.mark.parametrize(
        "text", ["", "9", "945", "0945", "12:75", "150:30", "abc", "1:2:3", ":"]
    )
    def test_idempotent(self, text: str) -> None:
        once = format_time_entry(text)
        assert format_time_entry(once) == once

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1" * 5000, "11:59"),
            ("1" * 5000 + ":30", "99:30"),
            ("12:" + "7" * 5000, "12:59"),
            ("0" * 5000 + "9:45", "9:45"),
            ("000009:05", "9:05"),
        ],
        ids=["minutes", "minutes-with-colon", "seconds", "zero-padded", "padded"],
    )
    def test_very_long_segments_clamp(self, text: str, expected: str) -> None:
        """Over-long segments clamp instead of failing to convert."""
        assert format_time_entry(text) == expected
        assert format_time_entry(expected) == expected

    def test_complete_entry_parses(self) -> None:
        assert parse_time(format_time_entry("0945")) == 585


class TestBodyweightMultiple:
    """Lift divided by bodyweight."""

    def test_ratio(self) -> None:
        assert bodyweight_multiple(300, 150) == pytest.approx(2.0)
        assert bodyweight_multiple("225", "150") == pytest.approx(1.5)

    def test_overflowing_ratio(self) -> None:
        assert bodyweight_multiple(1e308, 1e-10) is None

    @pytest.mark.parametrize("bodyweight", [None, 0, -150, math.nan, "heavy"])
    def test_invalid_bodyweight(self, bodyweight: object) -> None:
        assert bodyweight_multiple(300, bodyweight) is None


class TestNormalize:
    """Dispatch by unit and computation."""

    def test_every_unit_has_a_normalizer(self) -> None:
        assert set(UNIT_NORMALIZERS) == set(Unit)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent(self, raw: object) -> None:
        for spec in (LIFT, RUN, PULLS, JUMP):
            assert normalize(spec, raw, bodyweight=150) is None

    def test_bodyweight_relative(self) -> None:
        assert normalize(LIFT, 150, bodyweight=150) == pytest.approx(1.0)
        assert normalize(LIFT, "225", bodyweight=150) == pytest.approx(1.5)

    def test_bodyweight_relative_without_bodyweight(self) -> None:
        assert normalize(LIFT, 150) is None
        assert normalize(LIFT, 150, bodyweight=0) is None

    def test_seconds_from_time_string(self) -> None:
        assert normalize(RUN, "9:45") == 585.0

    def test_seconds_number_passes_through(self) -> None:
        """Numbers are already seconds and are not re-parsed."""
        assert normalize(RUN, 585) == 585.0
        assert normalize(RUN, 59.5) == 59.5

    def test_seconds_malformed(self) -> None:
        assert normalize(RUN, "9:75") is None
        assert normalize(RUN, "585") is None

    def test_plain_numbers(self) -> None:
        assert normalize(PULLS, "12") == 12.0
        assert normalize(PULLS, 0) == 0.0
        assert normalize(JUMP, 8.25) == 8.25

    @pytest.mark.parametrize("raw", ["twelve", True, math.nan, math.inf, 10**400])
    def test_malformed_number(self, raw: object) -> None:
        assert normalize(PULLS, raw) is None

    def test_malformed_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="gauntlet.scoring.units"):
            normalize(PULLS, "twelve")
        assert "Malformed result for reps test" in caplog.text
