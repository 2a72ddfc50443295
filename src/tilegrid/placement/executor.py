"""
Module: placement.executor

Purpose:
    Apply a resolver Decision to a registry, producing a new registry.
    The input registry is never modified, so an abandoned drag needs no
    rollback.

Key Functions:
    - apply(): Main entry point
    - insertion_index(): Remove-then-insert index correction

Algorithm:
    1. Remove the dragged tile from its group; an emptied group is marked
       for deletion but keeps its slot for now
    2. BLOCK: new single-tile group before (TOP) / after (BOTTOM) the target
    3. INLINE: insert before (LEFT) / after (RIGHT) the closest tile
    4. Drop the marked group, then rebuild the registry

Dependencies:
    - core.models: Registry, TileGroup, Tile
    - core.utils: generate_identifier
    - placement.models: Decision, Strategy

Used By:
    - editor.session: Drop handling
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from tilegrid.core.models import Registry, RegistryError, Tile, TileGroup
from tilegrid.core.utils import generate_identifier

from .models import Decision, Strategy

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 32


def insertion_index(source_index: int, target_index: int, before: bool) -> int:
    """
    Index to insert at once the source item has been removed.

    Both indexes refer to the sequence *before* removal. When the source
    precedes the target, removing it shifts the target down by one.

    Args:
        source_index: Position of the item being moved
        target_index: Position of the item to land next to
        before: Land before the target (otherwise after)

    Returns:
        Index into the sequence after removal

    Example:
        >>> insertion_index(0, 2, before=False)  # [A, B, C] -> [B, C, A]
        2
        >>> insertion_index(2, 0, before=True)   # [A, B, C] -> [C, A, B]
        0
    """
    if source_index < target_index:
        return target_index - 1 if before else target_index
    return target_index if before else target_index + 1


def apply(
    registry: Registry,
    tile_id: str,
    decision: Optional[Decision],
    *,
    new_group_id: Optional[Callable[[], str]] = None,
) -> Registry:
    """
    Move a tile according to a decision.

    Args:
        registry: Registry to reorder
        tile_id: Identifier of the dragged tile
        decision: Resolver output (None means no move)
        new_group_id: Factory for the identifier of a block-created group

    Returns:
        New registry, or `registry` itself when there is nothing to do
        (no decision, unknown tile, stale target, drop onto own position)
    """
    if decision is None:
        return registry

    position = registry.locate(tile_id)
    if position is None:
        logger.debug(f"Ignoring drop of unknown tile {tile_id!r}")
        return registry

    target_idx = registry.index_of_group(decision.group.identifier)
    if target_idx is None:
        logger.warning(f"Ignoring stale decision: group {decision.group.identifier!r} no longer exists")
        return registry

    if decision.strategy is Strategy.BLOCK:
        result = _apply_block(registry, position, target_idx, decision, new_group_id)
    else:
        result = _apply_inline(registry, position, target_idx, decision)

    if result is not registry:
        logger.info(f"Moved tile {tile_id!r}: {decision!r}")
    return result


def _apply_block(
    registry: Registry,
    position: tuple[int, int],
    target_idx: int,
    decision: Decision,
    new_group_id: Optional[Callable[[], str]],
) -> Registry:
    src_g, src_t = position
    source = registry.groups[src_g]
    tile = source.tiles[src_t]
    remaining = source.tiles[:src_t] + source.tiles[src_t + 1:]

    if not remaining and src_g == target_idx:
        # Sole tile dropped on its own row: deleting and recreating the row
        # would change nothing but its identifier
        return registry

    slots: List[Optional[TileGroup]] = list(registry.groups)
    slots[src_g] = source.with_tiles(remaining) if remaining else None

    group = TileGroup(_unique_group_id(registry, new_group_id), (tile,))
    insert_at = target_idx if decision.direction.is_before else target_idx + 1
    slots.insert(insert_at, group)

    return registry.with_groups(g for g in slots if g is not None)


def _apply_inline(
    registry: Registry,
    position: tuple[int, int],
    target_idx: int,
    decision: Decision,
) -> Registry:
    src_g, src_t = position
    source = registry.groups[src_g]
    target = registry.groups[target_idx]
    tile = source.tiles[src_t]

    closest_id = decision.closest_tile.identifier
    if closest_id == tile.identifier:
        return registry
    closest_idx = target.index_of(closest_id)
    if closest_idx is None:
        logger.warning(
            f"Ignoring stale decision: tile {closest_id!r} is not in group {target.identifier!r}"
        )
        return registry

    before = decision.direction.is_before
    remaining = source.tiles[:src_t] + source.tiles[src_t + 1:]
    slots: List[Optional[TileGroup]] = list(registry.groups)

    if src_g == target_idx:
        tiles: List[Tile] = list(remaining)
        tiles.insert(insertion_index(src_t, closest_idx, before), tile)
        if tuple(tiles) == source.tiles:
            return registry
        slots[src_g] = source.with_tiles(tuple(tiles))
    else:
        tiles = list(target.tiles)
        tiles.insert(closest_idx if before else closest_idx + 1, tile)
        slots[target_idx] = target.with_tiles(tuple(tiles))
        slots[src_g] = source.with_tiles(remaining) if remaining else None

    return registry.with_groups(g for g in slots if g is not None)


def _unique_group_id(registry: Registry, factory: Optional[Callable[[], str]]) -> str:
    factory = factory or generate_identifier
    for _ in range(_MAX_ID_ATTEMPTS):
        candidate = factory()
        if registry.index_of_group(candidate) is None:
            return candidate
    raise RegistryError(f"Could not generate a unique group identifier in {_MAX_ID_ATTEMPTS} attempts")
