"""JSON Schema for standards catalog validation."""

from typing import Any

import jsonschema

from gauntlet.loader.models import AGE_BRACKETS, Computation, Direction, Unit

_THRESHOLD_TRIPLE: dict[str, Any] = {
    "type": "object",
    "required": ["basic", "athletic", "elite"],
    "properties": {
        "basic": {"type": "number"},
        "athletic": {"type": "number"},
        "elite": {"type": "number"},
    },
    "additionalProperties": False,
}

STANDARDS_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["name", "domains", "tests"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "version": {"type": ["string", "number"]},
        "description": {"type": "string"},
        "archetype": {
            "type": "object",
            "properties": {
                "force_domain": {"type": "string", "minLength": 1},
                "engine_domain": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
        "domains": {
            "type": "object",
            "minProperties": 1,
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string", "minLength": 1},
                "uniqueItems": True,
            },
        },
        "tests": {
            "type": "object",
            "minProperties": 1,
            "additionalProperties": {
                "type": "object",
                "required": ["unit", "direction", "thresholds"],
                "properties": {
                    "unit": {"enum": [u.value for u in Unit]},
                    "direction": {"enum": [d.value for d in Direction]},
                    "computation": {"enum": [c.value for c in Computation]},
                    "note": {"type": "string"},
                    "rule": {"type": "string"},
                    "thresholds": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "propertyNames": {"enum": list(AGE_BRACKETS)},
                            "additionalProperties": _THRESHOLD_TRIPLE,
                        },
                    },
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


def validate_schema(data: dict[str, Any]) -> list[str]:
    """Validate catalog data against the JSON Schema.

    Args:
        data: Data to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    validator = jsonschema.Draft7Validator(STANDARDS_SCHEMA)
    errors = []

    found = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    for error in found:
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")

    return errors
