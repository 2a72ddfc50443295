"""JSON schemas for registry payloads."""

from .validator import ValidationError, validate_registry

__all__ = ["ValidationError", "validate_registry"]
