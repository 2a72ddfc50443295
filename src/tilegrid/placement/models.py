"""
Module: placement.models

Purpose:
    Value types produced by the resolver. Decisions are recomputed from
    scratch on every pointer move and never accumulated.

Key Classes:
    - Strategy: Block (new row) or inline (join a row)
    - Direction: Side of the target the tile lands on
    - EnhancedTile: Dragged tile resolved against geometry (ephemeral)
    - Decision: Landing estimate handed to the executor and publisher

Used By:
    - placement.resolver: Creates EnhancedTile and Decision
    - placement.executor: Consumes Decision
    - placement.estimation: Maps Decision to an insert indicator
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tilegrid.core.models import Point, Rect, Tile, TileGroup


class Strategy(str, Enum):
    """
    How the dragged tile joins the layout.

    Attributes:
        BLOCK: Becomes a new single-tile row above or below the target row
        INLINE: Joins the target row, left or right of a sibling tile
    """

    BLOCK = "block"
    INLINE = "inline"


class Direction(str, Enum):
    """Side of the target. TOP/BOTTOM pair with BLOCK, LEFT/RIGHT with INLINE."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_before(self) -> bool:
        """True when the tile lands ahead of the target in render order."""
        return self in (Direction.TOP, Direction.LEFT)


@dataclass(frozen=True)
class EnhancedTile:
    """
    The dragged tile as seen by one resolve() call.

    Built fresh per call and discarded afterwards; holding on to one across
    pointer moves would keep stale geometry and a stale owning group.

    Attributes:
        tile: The dragged tile
        group: Group owning the tile at resolution time
        box: Resting box of the tile (before the drag offset)
        center: Box center shifted by the drag offset
    """

    tile: Tile
    group: TileGroup
    box: Rect
    center: Point

    @property
    def identifier(self) -> str:
        return self.tile.identifier


@dataclass(frozen=True)
class Decision:
    """
    Where a dragged tile would land if released now.

    Attributes:
        strategy: BLOCK or INLINE
        group: Candidate group (target row)
        direction: TOP/BOTTOM for BLOCK, LEFT/RIGHT for INLINE
        closest_tile: Sibling to insert next to (INLINE only)
    """

    strategy: Strategy
    group: TileGroup
    direction: Direction
    closest_tile: Optional[Tile] = None

    def __post_init__(self) -> None:
        if self.strategy is Strategy.BLOCK:
            if self.direction not in (Direction.TOP, Direction.BOTTOM):
                raise ValueError(f"block placement needs top/bottom, got {self.direction.value}")
            if self.closest_tile is not None:
                raise ValueError("block placement does not target a tile")
        else:
            if self.direction not in (Direction.LEFT, Direction.RIGHT):
                raise ValueError(f"inline placement needs left/right, got {self.direction.value}")
            if self.closest_tile is None:
                raise ValueError("inline placement needs a closest tile")

    def to_dict(self) -> dict:
        d = {
            "strategy": self.strategy.value,
            "group": self.group.identifier,
            "direction": self.direction.value,
        }
        if self.closest_tile is not None:
            d["closest_tile"] = self.closest_tile.identifier
        return d

    def __repr__(self) -> str:
        target = self.group.identifier
        if self.closest_tile is not None:
            target = f"{target}/{self.closest_tile.identifier}"
        return f"Decision({self.strategy.value}, {target}, {self.direction.value})"
