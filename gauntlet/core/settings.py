"""Gauntlet configuration management.

Configuration is loaded from several sources, highest priority first:
1. Explicit overrides (CLI options)
2. Environment variables (GAUNTLET_ prefix, ``__`` for nested fields)
3. Configuration file (gauntlet.config.yaml, searched upward from cwd)
4. Default values

Example usage:
    from gauntlet.core.settings import get_settings

    settings = get_settings()
    print(settings.profile.gender)

Environment variable support:
    GAUNTLET_LOG_LEVEL=DEBUG
    GAUNTLET_STANDARDS_FILE=/etc/gauntlet/standards.yaml
    GAUNTLET_PROFILE__BODYWEIGHT=182
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ["gauntlet.config.yaml", "gauntlet.config.yml"]

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the start directory or its parents.

    Args:
        start_dir: Directory to start search from.
            Defaults to current working directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()

    # Limit search depth
    for _ in range(10):
        for filename in CONFIG_FILE_NAMES:
            config_path = search_dir / filename
            if config_path.exists():
                return config_path

        parent = search_dir.parent
        if parent == search_dir:
            break
        search_dir = parent

    return None


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Unreadable or malformed files are logged and treated as empty.
    """
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
            return config if isinstance(config, dict) else {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except OSError as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


def _validate_level(v: str) -> str:
    upper_v = v.upper()
    if upper_v not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {v}. Must be one of {_VALID_LEVELS}")
    return upper_v


class ProfileSettings(BaseSettings):
    """Default athlete profile used when the CLI is not told otherwise."""

    model_config = SettingsConfigDict(env_prefix="GAUNTLET_PROFILE_", extra="ignore")

    gender: str = Field(default="male", description="Default gender key")
    age: int = Field(default=35, ge=21, le=120, description="Default age in years")
    bodyweight: float | None = Field(
        default=175.0,
        gt=0,
        description="Default bodyweight in lbs (used by bodyweight-relative tests)",
    )

    @field_validator("gender")
    @classmethod
    def normalize_gender(cls, v: str) -> str:
        """Gender keys are matched case-insensitively."""
        return v.strip().lower()


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="GAUNTLET_LOGGING_", extra="ignore")

    level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool | None = Field(
        default=None,
        description="Output logs as JSON (None: JSON when stderr is not a TTY)",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        return _validate_level(v)


class GauntletSettings(BaseSettings):
    """Main Gauntlet configuration settings.

    Example:
        settings = GauntletSettings(standards_file="my_standards.yaml")
        print(settings.profile.age)
    """

    model_config = SettingsConfigDict(
        env_prefix="GAUNTLET_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    log_level: str = Field(
        default="WARNING",
        description="Application log level",
    )
    standards_file: Path | None = Field(
        default=None,
        description="Standards catalog YAML. Defaults to the bundled catalog",
    )

    profile: ProfileSettings = Field(default_factory=ProfileSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        return _validate_level(v)

    @model_validator(mode="before")
    @classmethod
    def load_from_config_file(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Merge values from a discovered config file under explicit data."""
        if data.get("_skip_file_loading"):
            data.pop("_skip_file_loading", None)
            return data

        config_path = _find_config_file()
        if not config_path:
            return data

        file_config = _load_yaml_config(config_path)
        if not file_config:
            return data

        logger.debug("Loaded configuration from %s", config_path)
        merged = {**file_config, **data}
        for section in ["profile", "logging"]:
            if isinstance(file_config.get(section), dict):
                explicit = data.get(section)
                merged[section] = {
                    **file_config[section],
                    **(explicit if isinstance(explicit, dict) else {}),
                }
        return merged

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return self.model_dump(mode="json")


def get_settings(
    config_file: Path | None = None,
    **overrides: Any,
) -> GauntletSettings:
    """Get a Gauntlet settings instance.

    Args:
        config_file: Optional explicit path to a configuration file.
        **overrides: Explicit configuration overrides.

    Returns:
        Configured GauntletSettings instance.
    """
    if config_file and config_file.exists():
        file_config = _load_yaml_config(config_file)
        merged = {**file_config, **overrides, "_skip_file_loading": True}
        return GauntletSettings(**merged)

    return GauntletSettings(**overrides)


@lru_cache
def get_cached_settings() -> GauntletSettings:
    """Get cached settings instance.

    The cache can be cleared with get_cached_settings.cache_clear().
    """
    return get_settings()


def generate_example_config(output_path: Path | None = None) -> str:
    """Generate an example configuration file.

    Args:
        output_path: Optional path to write example config file.

    Returns:
        Example configuration as YAML string.
    """
    example = """\
# Gauntlet Configuration
# Environment variables override these values with the GAUNTLET_ prefix
# Example: GAUNTLET_LOG_LEVEL=DEBUG, GAUNTLET_PROFILE__AGE=41

log_level: WARNING           # DEBUG, INFO, WARNING, ERROR, CRITICAL
# standards_file: ./standards.yaml   # Defaults to the bundled catalog

profile:
  gender: male               # male or female
  age: 35                    # 21 or older
  bodyweight: 175            # lbs, used for bodyweight-relative lifts

# logging:
#   level: WARNING
#   json_output: null        # null: JSON when stderr is not a TTY
#   file: null               # Optional log file path
"""

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(example)
        logger.info("Generated example config at %s", output_path)

    return example
