"""
Module: registry

Purpose:
    The ordered collection of tile groups. Stored arena-style: a tuple of
    groups plus identifier lookups built once on construction, so that
    positional questions ("which group, which slot") are O(1) and every
    reorder produces a fresh, fully validated registry.

Key Classes:
    - Registry: Immutable ordered sequence of TileGroups
    - RegistryError: Structural invariant violation on construction

Dependencies:
    - dataclasses (std)
    - core.models.tiles: Tile, TileGroup
    - core.schemas.validator (from_dict only)

Used By:
    - placement.resolver: Tile/group lookup
    - placement.executor: Produces new registries
    - editor.session: Holds the current registry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .tiles import Tile, TileGroup


class RegistryError(ValueError):
    """Registry would violate a structural invariant."""
    pass


@dataclass(frozen=True, slots=True)
class Registry:
    """
    Ordered sequence of tile groups (immutable).

    Attributes:
        groups: Groups in render order (top to bottom)

    Invariants:
        - Group identifiers are unique
        - Tile identifiers are unique across all groups
        - Every group holds at least one tile (enforced by TileGroup)

    Example:
        >>> registry = Registry((TileGroup("g1", (Tile("a"),)),))
        >>> registry.group_of("a").identifier
        'g1'
        >>> registry.total_tile_count
        1
    """

    groups: tuple[TileGroup, ...] = ()
    _group_index: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )
    _tile_index: dict[str, tuple[int, int]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.groups, tuple):
            object.__setattr__(self, "groups", tuple(self.groups))

        group_index: dict[str, int] = {}
        tile_index: dict[str, tuple[int, int]] = {}
        for g_idx, group in enumerate(self.groups):
            if group.identifier in group_index:
                raise RegistryError(f"duplicate group identifier: {group.identifier!r}")
            group_index[group.identifier] = g_idx
            for t_idx, tile in enumerate(group.tiles):
                if tile.identifier in tile_index:
                    raise RegistryError(f"duplicate tile identifier: {tile.identifier!r}")
                tile_index[tile.identifier] = (g_idx, t_idx)

        object.__setattr__(self, "_group_index", group_index)
        object.__setattr__(self, "_tile_index", tile_index)

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[TileGroup]:
        return iter(self.groups)

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._tile_index

    def locate(self, tile_id: str) -> Optional[tuple[int, int]]:
        """
        Position of a tile as (group index, tile index).

        Returns:
            Index pair, or None if no such tile exists
        """
        return self._tile_index.get(tile_id)

    def find_tile(self, tile_id: str) -> Optional[Tile]:
        position = self.locate(tile_id)
        if position is None:
            return None
        g_idx, t_idx = position
        return self.groups[g_idx].tiles[t_idx]

    def group_of(self, tile_id: str) -> Optional[TileGroup]:
        """Group currently owning the tile, or None."""
        position = self.locate(tile_id)
        if position is None:
            return None
        return self.groups[position[0]]

    def index_of_group(self, group_id: str) -> Optional[int]:
        return self._group_index.get(group_id)

    def find_group(self, group_id: str) -> Optional[TileGroup]:
        index = self.index_of_group(group_id)
        return None if index is None else self.groups[index]

    def iter_tiles(self) -> Iterator[Tile]:
        """All tiles in render order (row by row)."""
        for group in self.groups:
            yield from group.tiles

    @property
    def total_tile_count(self) -> int:
        return len(self._tile_index)

    @property
    def group_ids(self) -> tuple[str, ...]:
        return tuple(group.identifier for group in self.groups)

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    def with_groups(self, groups: Iterable[TileGroup]) -> Registry:
        """New registry holding `groups`; invariants are re-checked."""
        return Registry(tuple(groups))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to a plain dictionary for presentation layers.

        Returns:
            Dict of the form {"groups": [{"identifier", "tiles": [...]}, ...]}
        """
        return {"groups": [group.to_dict() for group in self.groups]}

    @classmethod
    def from_dict(cls, data: dict, *, validate: bool = True) -> Registry:
        """
        Deserialize from a dictionary.

        Args:
            data: Registry payload
            validate: Whether to check the payload against the JSON schema

        Returns:
            Registry instance

        Raises:
            ValidationError: If validate=True and the payload is malformed
            RegistryError: If identifiers collide
        """
        if validate:
            from tilegrid.core.schemas.validator import validate_registry
            validate_registry(data)

        return cls(tuple(TileGroup.from_dict(g) for g in data.get("groups", [])))
