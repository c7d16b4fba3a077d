"""Shared pytest fixtures for Gauntlet tests."""

from pathlib import Path

import pytest

from gauntlet.core.logging import reset_logging
from gauntlet.loader import StandardsCatalog, StandardsLoader
from gauntlet.scoring import GauntletScorer, Profile


@pytest.fixture(autouse=True)
def isolated_logging():  # type: ignore[misc]
    """Keep handlers installed by one test out of the next."""
    yield
    reset_logging()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def standards_dir(fixtures_dir: Path) -> Path:
    """Return path to the standards fixtures directory."""
    return fixtures_dir / "standards"


@pytest.fixture
def mini_catalog_path(standards_dir: Path) -> Path:
    """Return path to the small three-test catalog."""
    return standards_dir / "mini.yaml"


@pytest.fixture
def mini_catalog(mini_catalog_path: Path) -> StandardsCatalog:
    """Return the small three-test catalog."""
    return StandardsLoader().load_file(mini_catalog_path)


@pytest.fixture
def default_catalog() -> StandardsCatalog:
    """Return the bundled catalog."""
    return StandardsLoader().load_default()


@pytest.fixture
def mini_scorer(mini_catalog: StandardsCatalog) -> GauntletScorer:
    """Return a scorer for the small catalog."""
    return GauntletScorer(mini_catalog)


@pytest.fixture
def male_37() -> Profile:
    """Return a 37-year-old male profile weighing 150 lbs."""
    return Profile(gender="male", age=37, bodyweight=150)


@pytest.fixture
def female_37() -> Profile:
    """Return a 37-year-old female profile weighing 130 lbs."""
    return Profile(gender="female", age=37, bodyweight=130)
