"""
Schema Validation Utilities

Validates registry payloads before they are turned into models.

The JSON Schema covers shape and types; identifier uniqueness cannot be
expressed there, so it is checked afterwards and reported the same way.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_registry(data: dict[str, Any]) -> None:
    """
    Validate a registry payload.

    Args:
        data: Registry dictionary ({"groups": [...]})

    Raises:
        ValidationError: If data is malformed or identifiers collide
    """
    schema = _load_schema("registry")
    validator = jsonschema.Draft202012Validator(schema)
    schema_errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if schema_errors:
        first = schema_errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in schema_errors],
        )

    _validate_unique_identifiers(data["groups"])


def _validate_unique_identifiers(groups: list[dict[str, Any]]) -> None:
    """Group ids must be unique; tile ids must be unique across all groups."""
    errors: list[str] = []
    seen_groups: set[str] = set()
    seen_tiles: set[str] = set()

    for g_idx, group in enumerate(groups):
        group_id = group["identifier"]
        if group_id in seen_groups:
            errors.append(f"groups.{g_idx}: duplicate group identifier {group_id!r}")
        seen_groups.add(group_id)

        for t_idx, tile in enumerate(group["tiles"]):
            tile_id = tile["identifier"]
            if tile_id in seen_tiles:
                errors.append(
                    f"groups.{g_idx}.tiles.{t_idx}: duplicate tile identifier {tile_id!r}"
                )
            seen_tiles.add(tile_id)

    if errors:
        raise ValidationError(
            f"Duplicate identifiers: {errors[0]}",
            path=errors[0].split(":", 1)[0],
            errors=errors,
        )
