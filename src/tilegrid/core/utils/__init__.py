"""Small shared helpers."""

from .identifiers import generate_identifier

__all__ = ["generate_identifier"]
