"""
Module: editor.session

Purpose:
    Glue between a drag tracker and the placement engine. Holds the current
    registry and geometry, publishes the live estimate on every move and
    commits the reorder on drop.

Key Classes:
    - EditorSession: Drag move / drop / cancel handling

Dependencies:
    - placement: resolve, apply, EstimationPublisher
    - core.models: Registry

Used By:
    - gui.bridge.EditorBridge
    - Headless hosts and tests
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from tilegrid.core.models import Offset, Registry
from tilegrid.placement import (
    Decision,
    EstimationPublisher,
    GeometryProvider,
    PlacementConfig,
    apply,
    resolve,
)

logger = logging.getLogger(__name__)

LayoutCallback = Callable[[Registry], None]


class EditorSession:
    """
    Drag handling for one editor surface.

    The session keeps no state between pointer moves other than the last
    published estimate; each move is resolved from scratch against the
    current registry and geometry.

    Example:
        >>> session = EditorSession(registry, row_snapshot(registry))
        >>> session.handle_tile_move("a", (0, 120))
        Decision(block, g2, top)
        >>> session.handle_tile_drop("a", (0, 120))
        Registry(groups=(...))
    """

    def __init__(
        self,
        registry: Registry,
        geometry: GeometryProvider,
        config: Optional[PlacementConfig] = None,
        publisher: Optional[EstimationPublisher] = None,
    ) -> None:
        self._registry = registry
        self._geometry = geometry
        self._config = config
        self.publisher = publisher or EstimationPublisher()
        self._layout_subscribers: List[LayoutCallback] = []

    @classmethod
    def from_dict(
        cls,
        data: dict,
        geometry: GeometryProvider,
        config: Optional[PlacementConfig] = None,
    ) -> EditorSession:
        """Create a session from a (validated) registry payload."""
        return cls(Registry.from_dict(data), geometry, config)

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def geometry(self) -> GeometryProvider:
        return self._geometry

    @property
    def estimation(self) -> Optional[Decision]:
        return self.publisher.current

    def set_geometry(self, geometry: GeometryProvider) -> None:
        self._geometry = geometry

    def replace_registry(self, registry: Registry) -> None:
        """Swap in a new registry (e.g. re-initialisation) and notify."""
        self.publisher.clear()
        self._set_registry(registry)

    def subscribe_layout(self, callback: LayoutCallback) -> Callable[[], None]:
        """
        Register a callback for committed layout changes.

        Returns:
            Function that removes the callback again
        """
        self._layout_subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._layout_subscribers:
                self._layout_subscribers.remove(callback)

        return _unsubscribe

    # ─────────────────────────────────────────────────────────────────────────
    # Drag handling
    # ─────────────────────────────────────────────────────────────────────────

    def handle_tile_move(self, tile_id: str, offset: Offset | Sequence[float]) -> Optional[Decision]:
        """Resolve the landing estimate for a move and publish it."""
        decision = resolve(self._registry, tile_id, offset, self._geometry, self._config)
        self.publisher.publish(decision)
        return decision

    def handle_tile_drop(self, tile_id: str, offset: Offset | Sequence[float]) -> Registry:
        """
        Commit the move for a released tile.

        Returns:
            The registry after the move (unchanged on a no-op drop)
        """
        decision = resolve(self._registry, tile_id, offset, self._geometry, self._config)
        updated = apply(self._registry, tile_id, decision)
        self.publisher.clear()
        if updated is not self._registry:
            self._set_registry(updated)
        return self._registry

    def cancel_drag(self) -> None:
        """Abandon the drag; the registry is left as it was."""
        self.publisher.clear()

    def _set_registry(self, registry: Registry) -> None:
        self._registry = registry
        for callback in list(self._layout_subscribers):
            try:
                callback(registry)
            except Exception:
                logger.exception(f"Layout subscriber {callback!r} failed")
