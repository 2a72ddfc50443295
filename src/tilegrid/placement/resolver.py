"""
Module: placement.resolver

Purpose:
    Estimate where a dragged tile would land, purely from geometry.
    Pure function: reads the registry and the geometry snapshot, returns a
    Decision (or None), mutates nothing.

Key Functions:
    - resolve(): Main entry point
    - enhance_tile(): Resolve the dragged tile's center for one call

Algorithm:
    1. Locate the dragged tile and its group; both boxes must be measured
    2. center = tile box center + drag offset
    3. Candidate group = group whose center y is nearest center.y
    4. Inline if center lies in the candidate box inset by the thresholds,
       block otherwise
    5. Block: TOP if the group center is below the dragged center, else BOTTOM
       Inline: nearest other tile by center x; RIGHT if that tile is left of
       the dragged center, else LEFT. No other tile -> block.

Dependencies:
    - core.models: Registry, Rect, Offset
    - placement.config: PlacementConfig
    - placement.geometry: GeometryProvider

Used By:
    - editor.session: Live estimation and drop
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from tilegrid.core.models import Offset, Point, Rect, Registry, Tile, TileGroup

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .geometry import GeometryProvider
from .models import Decision, Direction, EnhancedTile, Strategy

logger = logging.getLogger(__name__)


def resolve(
    registry: Registry,
    tile_id: str,
    offset: Offset | Sequence[float],
    geometry: GeometryProvider,
    config: Optional[PlacementConfig] = None,
) -> Optional[Decision]:
    """
    Determine the landing decision for a dragged tile.

    Args:
        registry: Current registry snapshot
        tile_id: Identifier of the dragged tile
        offset: Drag offset of the tile's center
        geometry: Provider of tile and group boxes
        config: Thresholds (defaults to DEFAULT_PLACEMENT_CONFIG)

    Returns:
        Decision, or None when the tile is unknown or geometry is missing
    """
    config = config or DEFAULT_PLACEMENT_CONFIG

    dragged = enhance_tile(registry, tile_id, Offset.coerce(offset), geometry)
    if dragged is None:
        return None

    candidate = _closest_group(registry, dragged.center, geometry)
    if candidate is None:
        logger.debug(f"No measured group to place {tile_id!r} against")
        return None
    group, group_box = candidate

    block_direction = (
        Direction.TOP if group_box.center.y > dragged.center.y else Direction.BOTTOM
    )

    if not group_box.inset(config.thresholds).contains(dragged.center):
        return Decision(Strategy.BLOCK, group, block_direction)

    closest = _closest_tile(group, dragged, geometry)
    if closest is None:
        # Only the dragged tile lives in this row; inline has nothing to target
        return Decision(Strategy.BLOCK, group, block_direction)

    tile, tile_box = closest
    direction = Direction.RIGHT if tile_box.center.x < dragged.center.x else Direction.LEFT
    return Decision(Strategy.INLINE, group, direction, closest_tile=tile)


def enhance_tile(
    registry: Registry,
    tile_id: str,
    offset: Offset,
    geometry: GeometryProvider,
) -> Optional[EnhancedTile]:
    """
    Build the per-call view of the dragged tile.

    Returns:
        EnhancedTile, or None if the tile is unknown or it or its group
        has no measured box
    """
    tile = registry.find_tile(tile_id)
    group = registry.group_of(tile_id)
    if tile is None or group is None:
        logger.debug(f"Dragged tile {tile_id!r} is not in the registry")
        return None

    tile_box = _measured(geometry, tile.identifier)
    group_box = _measured(geometry, group.identifier)
    if tile_box is None or group_box is None:
        logger.debug(f"Geometry for {tile_id!r} (group {group.identifier!r}) not measured yet")
        return None

    return EnhancedTile(tile=tile, group=group, box=tile_box, center=tile_box.center + offset)


def _measured(geometry: GeometryProvider, identifier: str) -> Optional[Rect]:
    box = geometry.box_of(identifier)
    if box is None or not box.is_measured:
        return None
    return box


def _closest_group(
    registry: Registry,
    center: Point,
    geometry: GeometryProvider,
) -> Optional[tuple[TileGroup, Rect]]:
    """Group whose vertical center is nearest; first in order wins ties."""
    best: Optional[tuple[TileGroup, Rect]] = None
    best_distance = 0.0

    for group in registry.groups:
        box = _measured(geometry, group.identifier)
        if box is None:
            continue
        distance = abs(box.center.y - center.y)
        if best is None or distance < best_distance:
            best = (group, box)
            best_distance = distance

    return best


def _closest_tile(
    group: TileGroup,
    dragged: EnhancedTile,
    geometry: GeometryProvider,
) -> Optional[tuple[Tile, Rect]]:
    """Other tile in the group whose horizontal center is nearest."""
    best: Optional[tuple[Tile, Rect]] = None
    best_distance = 0.0

    for tile in group.tiles:
        if tile.identifier == dragged.identifier:
            continue
        box = _measured(geometry, tile.identifier)
        if box is None:
            continue
        distance = abs(box.center.x - dragged.center.x)
        if best is None or distance < best_distance:
            best = (tile, box)
            best_distance = distance

    return best
