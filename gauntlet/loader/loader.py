"""Standards loader for parsing and validating catalogs."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gauntlet.core.exceptions import ValidationError
from gauntlet.loader.models import (
    ArchetypeConfig,
    Computation,
    Direction,
    StandardsCatalog,
    Unit,
)
from gauntlet.loader.parser import VariableSubstitution, YAMLParser
from gauntlet.loader.schema import validate_schema

logger = logging.getLogger(__name__)

DEFAULT_STANDARDS_PATH = Path(__file__).parent / "data" / "gauntlet.yaml"


class StandardsLoader:
    """Load and validate standards catalogs from YAML."""

    def __init__(self, env: dict[str, str] | None = None):
        """Initialize standards loader.

        Args:
            env: Custom environment for variable substitution, defaults to os.environ
        """
        self.parser = YAMLParser()
        self.substitution = VariableSubstitution(env=env)

    def load_default(self) -> StandardsCatalog:
        """Load the catalog bundled with the package."""
        return self.load_file(DEFAULT_STANDARDS_PATH)

    def load_file(self, file_path: str | Path) -> StandardsCatalog:
        """Load a catalog from a YAML file.

        Args:
            file_path: Path to the catalog YAML file

        Returns:
            Validated StandardsCatalog

        Raises:
            ParseError: If YAML parsing fails
            ValidationError: If validation fails
        """
        file_path = Path(file_path)
        data = self.parser.parse_file(file_path)
        return self._process_data(data, str(file_path))

    def load_string(self, content: str) -> StandardsCatalog:
        """Load a catalog from a YAML string.

        Raises:
            ParseError: If YAML parsing fails
            ValidationError: If validation fails
        """
        data = self.parser.parse_string(content)
        return self._process_data(data, None)

    def _process_data(
        self, data: dict[str, Any], file_path: str | None
    ) -> StandardsCatalog:
        """Substitute variables, validate, and build the catalog model."""
        try:
            data = self.substitution.substitute(data)
        except ValidationError as e:
            if file_path and not e.file_path:
                raise ValidationError(e.message, file_path=file_path) from e
            raise

        schema_errors = validate_schema(data)
        if schema_errors:
            error_msg = "Schema validation failed:\n  " + "\n  ".join(schema_errors)
            raise ValidationError(error_msg, file_path=file_path, errors=schema_errors)

        self._validate_semantics(data, file_path)

        try:
            catalog = StandardsCatalog(**data)
        except PydanticValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error["loc"])
                errors.append(f"{loc}: {error['msg']}")

            error_msg = "Model validation failed:\n  " + "\n  ".join(errors)
            raise ValidationError(error_msg, file_path=file_path, errors=errors) from e

        logger.info(
            "Loaded standards catalog '%s' v%s: %d tests in %d domains",
            catalog.name,
            catalog.version,
            len(catalog.tests),
            len(catalog.domains),
        )
        return catalog

    def _validate_semantics(self, data: dict[str, Any], file_path: str | None) -> None:
        """Cross-reference checks the schema cannot express.

        Raises:
            ValidationError: With every problem found
        """
        errors: list[str] = []
        tests: dict[str, Any] = data["tests"]
        domains: dict[str, list[str]] = data["domains"]

        # Domain membership
        owner: dict[str, str] = {}
        for domain, test_names in domains.items():
            for test_name in test_names:
                if test_name not in tests:
                    errors.append(f"domains.{domain}: unknown test '{test_name}'")
                elif test_name in owner:
                    errors.append(
                        f"domains.{domain}: test '{test_name}' is already in "
                        f"domain '{owner[test_name]}'"
                    )
                else:
                    owner[test_name] = domain

        unassigned = [name for name in tests if name not in owner]
        if unassigned:
            logger.warning(
                "Tests outside every domain are excluded from aggregation: %s",
                ", ".join(unassigned),
            )

        # Archetype pair
        archetype = ArchetypeConfig(**data.get("archetype", {}))
        for key in ("force_domain", "engine_domain"):
            domain = getattr(archetype, key)
            if domain not in domains:
                errors.append(f"archetype.{key}: unknown domain '{domain}'")
        if archetype.force_domain == archetype.engine_domain:
            errors.append("archetype: force_domain and engine_domain must differ")

        # Per-test metadata and thresholds
        for test_name, spec in tests.items():
            self._validate_test(test_name, spec, errors)

        if errors:
            error_msg = "Semantic validation failed:\n  " + "\n  ".join(errors)
            raise ValidationError(error_msg, file_path=file_path, errors=errors)

    def _validate_test(
        self, test_name: str, spec: dict[str, Any], errors: list[str]
    ) -> None:
        path = f"tests.{test_name}"
        unit = Unit(spec["unit"])
        direction = Direction(spec["direction"])
        computation = Computation(spec.get("computation", Computation.ABSOLUTE))

        if (computation is Computation.BODYWEIGHT_RELATIVE) != (
            unit is Unit.BODYWEIGHT_MULTIPLE
        ):
            errors.append(
                f"{path}: computation '{computation.value}' does not match "
                f"unit '{unit.value}'"
            )

        if not spec["thresholds"]:
            errors.append(f"{path}.thresholds: no threshold rows defined")

        for gender, brackets in spec["thresholds"].items():
            for bracket, triple in brackets.items():
                row = f"{path}.thresholds.{gender}.{bracket}"
                basic, athletic, elite = (
                    triple["basic"],
                    triple["athletic"],
                    triple["elite"],
                )
                if elite == 0:
                    errors.append(f"{row}: elite threshold must not be 0")
                if direction is Direction.HIGHER_IS_BETTER:
                    ordered = basic < athletic < elite
                    expected = "basic < athletic < elite"
                else:
                    ordered = basic > athletic > elite
                    expected = "basic > athletic > elite"
                if not ordered:
                    errors.append(
                        f"{row}: expected {expected}, got "
                        f"{basic}/{athletic}/{elite}"
                    )
