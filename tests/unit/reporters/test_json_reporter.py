"""Tests for the JSON reporter."""

import json
from io import StringIO
from pathlib import Path
from typing import Any

import pytest

from gauntlet.reporters import JSONReporter
from gauntlet.scoring import GauntletScorer, Profile
from gauntlet.scoring.models import ProfileReport


@pytest.fixture
def report(mini_scorer: GauntletScorer, male_37: Profile) -> ProfileReport:
    return mini_scorer.evaluate(
        {"Lift": 225, "Run": "9:45", "Squat": 300}, male_37
    )


def render(reporter: JSONReporter, report: ProfileReport) -> dict[str, Any]:
    output = StringIO()
    reporter._output = output
    reporter.report(report)
    return json.loads(output.getvalue())


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_name(self) -> None:
        assert JSONReporter().name == "json"

    def test_structure(self, report: ProfileReport) -> None:
        data = render(JSONReporter(), report)

        assert data["version"] == JSONReporter.FORMAT_VERSION
        assert "generated_at" in data
        assert data["catalog"] == "Mini Gauntlet"
        assert data["profile"] == {
            "gender": "male",
            "age": 37,
            "bodyweight": 150.0,
            "age_bracket": "35-39",
        }
        assert data["unknown_tests"] == ["Squat"]

    def test_summary(self, report: ProfileReport) -> None:
        summary = render(JSONReporter(), report)["summary"]

        assert summary["overall"] == pytest.approx(68.12, abs=0.01)
        assert summary["overall_display"] == 68
        assert summary["completed"] == 2
        assert summary["total"] == 3
        assert summary["archetype"] == "ranger"
        assert summary["status"] == "hybrid-beast"
        assert summary["status_label"] == "Hybrid Beast"

    def test_domains(self, report: ProfileReport) -> None:
        domains = render(JSONReporter(), report)["domains"]

        assert domains["Strength"] == {
            "average": 66.0,
            "completed": 1,
            "total": 2,
            "tests": ["Lift", "Pulls"],
        }

    def test_tests(self, report: ProfileReport) -> None:
        tests = {t["test_name"]: t for t in render(JSONReporter(), report)["tests"]}

        assert list(tests) == ["Lift", "Pulls", "Run"]
        assert tests["Lift"]["unit"] == "bodyweight-multiple"
        assert tests["Lift"]["display"] == "1.50x"
        assert tests["Lift"]["tier"] == "athletic"
        assert tests["Run"]["raw"] == "9:45"
        assert tests["Run"]["value"] == 585
        assert tests["Run"]["display"] == "9:45"
        assert tests["Run"]["score"] == 70.25
        assert tests["Run"]["thresholds"] == {
            "basic": 720,
            "athletic": 600,
            "elite": 480,
        }
        assert tests["Pulls"]["attempted"] is False
        assert tests["Pulls"]["display"] == "-"

    def test_without_thresholds(self, report: ProfileReport) -> None:
        data = render(JSONReporter(include_thresholds=False), report)
        assert all("thresholds" not in test for test in data["tests"])

    def test_compact(self, report: ProfileReport) -> None:
        output = StringIO()
        JSONReporter(output=output, indent=None).report(report)
        assert output.getvalue().count("\n") == 1

    def test_output_file(self, tmp_path: Path, report: ProfileReport) -> None:
        path = tmp_path / "nested" / "report.json"
        JSONReporter(output_file=path).report(report)

        data = json.loads(path.read_text())
        assert data["catalog"] == "Mini Gauntlet"
