"""
Module: tiles

Purpose:
    Tile and TileGroup models. A group is one horizontal row of tiles;
    tile order inside the group is render order.

Key Classes:
    - Tile: Movable tile with an opaque display style
    - TileGroup: Non-empty ordered row of tiles

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.registry.Registry
    - placement.resolver / placement.executor
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Tile:
    """
    A single movable tile.

    Geometry is not stored here; the geometry provider is queried by
    identifier. The style payload is passed through to the presentation
    layer untouched.

    Attributes:
        identifier: Globally unique tile identifier
        style: Display style payload (not interpreted by the engine)
    """

    identifier: str
    style: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("tile identifier must be a non-empty string")

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"identifier": self.identifier}
        if self.style:
            d["style"] = dict(self.style)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Tile:
        return cls(identifier=data["identifier"], style=dict(data.get("style", {})))


@dataclass(frozen=True, slots=True)
class TileGroup:
    """
    Ordered row of tiles (immutable).

    Attributes:
        identifier: Unique group identifier
        tiles: Tiles in render order

    Invariants:
        - At least one tile. A group that would become empty is dropped
          from the registry instead of being constructed.

    Example:
        >>> group = TileGroup("row-1", (Tile("a"), Tile("b")))
        >>> group.index_of("b")
        1
    """

    identifier: str
    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("group identifier must be a non-empty string")
        if not isinstance(self.tiles, tuple):
            object.__setattr__(self, "tiles", tuple(self.tiles))
        if not self.tiles:
            raise ValueError(f"group {self.identifier!r} must contain at least one tile")

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def index_of(self, tile_id: str) -> Optional[int]:
        """Position of a tile in this group, or None if absent."""
        for index, tile in enumerate(self.tiles):
            if tile.identifier == tile_id:
                return index
        return None

    def with_tiles(self, tiles: tuple[Tile, ...]) -> TileGroup:
        """Copy of this group holding a different tile sequence."""
        return replace(self, tiles=tuple(tiles))

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "tiles": [tile.to_dict() for tile in self.tiles],
        }

    @classmethod
    def from_dict(cls, data: dict) -> TileGroup:
        return cls(
            identifier=data["identifier"],
            tiles=tuple(Tile.from_dict(t) for t in data.get("tiles", [])),
        )
