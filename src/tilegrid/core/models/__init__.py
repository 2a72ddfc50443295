"""
Core Models Package

Immutable, validated data models shared by the placement engine and its
hosts.

All models in this package are frozen dataclasses. A reorder never edits a
registry in place; it builds a new one, so a drag that is abandoned midway
leaves the previous registry untouched.
"""

from .geometry import Offset, Point, Rect
from .tiles import Tile, TileGroup
from .registry import Registry, RegistryError

__all__ = [
    "Offset",
    "Point",
    "Rect",
    "Tile",
    "TileGroup",
    "Registry",
    "RegistryError",
]
