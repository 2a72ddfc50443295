"""Qt signal bridge for an EditorSession.

Lets widgets drive the placement engine through slots and repaint from
signals instead of holding callbacks themselves.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from tilegrid.core.models import Offset, Registry
from tilegrid.editor import EditorSession
from tilegrid.placement import Decision, indicator_for

logger = logging.getLogger(__name__)


class EditorBridge(QObject):
    """Re-emits session estimates and layout changes as Qt signals.

    Usage:
        bridge = EditorBridge(session)
        bridge.indicatorChanged.connect(canvas.show_insert_line)
        bridge.layoutChanged.connect(canvas.rebuild)
        tile_widget.dragged.connect(bridge.moveTile)
    """

    # Emitted with the new Decision (or None) when the estimate changes
    estimationChanged = Signal(object)
    # Emitted with the InsertIndicator (or None) for the same change
    indicatorChanged = Signal(object)
    # Emitted with the new Registry after a committed reorder
    layoutChanged = Signal(object)

    def __init__(self, session: EditorSession, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._session = session
        self._unsubscribers = [
            session.publisher.subscribe(self._on_estimation),
            session.subscribe_layout(self._on_layout),
        ]

    @property
    def session(self) -> EditorSession:
        return self._session

    @Slot(str, float, float)
    def moveTile(self, tile_id: str, dx: float, dy: float) -> None:
        self._session.handle_tile_move(tile_id, Offset(dx, dy))

    @Slot(str, float, float)
    def dropTile(self, tile_id: str, dx: float, dy: float) -> None:
        self._session.handle_tile_drop(tile_id, Offset(dx, dy))

    @Slot()
    def cancelDrag(self) -> None:
        self._session.cancel_drag()

    def disconnect_session(self) -> None:
        """Stop forwarding session events (call before discarding the bridge)."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_estimation(self, decision: Optional[Decision]) -> None:
        self.estimationChanged.emit(decision)
        self.indicatorChanged.emit(indicator_for(decision))

    def _on_layout(self, registry: Registry) -> None:
        logger.debug(f"Layout changed: {len(registry)} rows")
        self.layoutChanged.emit(registry)
