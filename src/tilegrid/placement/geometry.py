"""
Module: placement.geometry

Purpose:
    Geometry query surface used by the resolver. The engine never measures
    anything itself; it asks a provider for the box of a tile or group by
    identifier and treats a missing or zero-sized box as "not measured".

Key Classes:
    - GeometryProvider: Protocol with a single box_of() query
    - MappingGeometryProvider: Immutable snapshot backed by a dict

Key Functions:
    - row_snapshot(): Stack a registry's rows into a snapshot (headless hosts)

Dependencies:
    - core.models: Rect, Registry

Used By:
    - placement.resolver
    - editor.session
    - gui.geometry: WidgetGeometryProvider (Qt-backed implementation)
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from tilegrid.core.models import Rect, Registry

logger = logging.getLogger(__name__)

BoxLike = Union[Rect, Sequence[float], Mapping[str, float]]


@runtime_checkable
class GeometryProvider(Protocol):
    """Anything that can report the on-screen box of a tile or group."""

    def box_of(self, identifier: str) -> Optional[Rect]:
        """Current box for `identifier`, or None when unknown/unmeasured."""
        ...


def _to_rect(value: BoxLike) -> Rect:
    if isinstance(value, Rect):
        return value
    if isinstance(value, Mapping):
        return Rect.from_dict(value)
    top, left, width, height = value
    return Rect(top=top, left=left, width=width, height=height)


class MappingGeometryProvider:
    """
    Geometry snapshot held in memory.

    Boxes may be given as Rect instances, (top, left, width, height)
    tuples or {"top", "left", "width", "height"} mappings.

    Example:
        >>> geometry = MappingGeometryProvider({"a": (0, 0, 100, 40)})
        >>> geometry.box_of("a").bottom
        40
        >>> geometry.box_of("missing") is None
        True
    """

    def __init__(self, boxes: Mapping[str, BoxLike] | None = None) -> None:
        self._boxes: dict[str, Rect] = {
            identifier: _to_rect(box) for identifier, box in (boxes or {}).items()
        }

    def box_of(self, identifier: str) -> Optional[Rect]:
        return self._boxes.get(identifier)

    def with_box(self, identifier: str, box: BoxLike) -> MappingGeometryProvider:
        """Copy of this snapshot with one box added or replaced."""
        boxes = dict(self._boxes)
        boxes[identifier] = _to_rect(box)
        return MappingGeometryProvider(boxes)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._boxes

    def __len__(self) -> int:
        return len(self._boxes)


def row_snapshot(
    registry: Registry,
    *,
    tile_width: float = 100,
    tile_height: float = 100,
    heights: Mapping[str, float] | None = None,
    row_gap: float = 0,
    tile_gap: float = 0,
    origin: tuple[float, float] = (0, 0),
) -> MappingGeometryProvider:
    """
    Lay out a registry as stacked rows and return the resulting snapshot.

    Rows run top to bottom in registry order; tiles run left to right in
    group order. A row is as tall as its tallest tile and as wide as its
    tiles plus the gaps between them.

    Args:
        registry: Registry to lay out
        tile_width: Width of every tile
        tile_height: Default tile height
        heights: Per-tile height overrides by identifier
        row_gap: Vertical spacing between rows
        tile_gap: Horizontal spacing between tiles in a row
        origin: (left, top) of the first row

    Returns:
        MappingGeometryProvider with a box for every tile and group

    Example:
        >>> geometry = row_snapshot(registry, tile_width=50, tile_height=20)
        >>> geometry.box_of(registry.groups[1].identifier).top
        20
    """
    heights = heights or {}
    left0, y = origin
    boxes: dict[str, Rect] = {}

    for index, group in enumerate(registry.groups):
        if index > 0:
            y += row_gap

        x = left0
        row_height = 0.0
        for position, tile in enumerate(group.tiles):
            if position > 0:
                x += tile_gap
            height = heights.get(tile.identifier, tile_height)
            boxes[tile.identifier] = Rect(top=y, left=x, width=tile_width, height=height)
            row_height = max(row_height, height)
            x += tile_width

        boxes[group.identifier] = Rect(top=y, left=left0, width=x - left0, height=row_height)
        y += row_height

    logger.debug(f"Laid out {len(registry)} rows into {len(boxes)} boxes")
    return MappingGeometryProvider(boxes)
