"""Geometry provider backed by live Qt widgets.

Boxes are reported in the coordinate space of a common root widget so that
tiles and rows can be compared directly.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QPoint
from PySide6.QtWidgets import QWidget

from tilegrid.core.models import Rect

logger = logging.getLogger(__name__)


class WidgetGeometryProvider:
    """Maps tile/group identifiers to widgets and reports their boxes.

    Usage:
        geometry = WidgetGeometryProvider(editor_widget)
        geometry.register(group.identifier, row_widget)
        geometry.register(tile.identifier, tile_widget)
        session = EditorSession(registry, geometry)
    """

    def __init__(self, root: QWidget) -> None:
        self._root = root
        self._widgets: Dict[str, QWidget] = {}

    @property
    def root(self) -> QWidget:
        return self._root

    def register(self, identifier: str, widget: QWidget) -> None:
        """Track `widget` as the on-screen box of `identifier`.

        Re-registering an identifier replaces the previous widget, which is
        what happens when a row is rebuilt after a reorder.
        """
        self._widgets[identifier] = widget

    def unregister(self, identifier: str) -> None:
        self._widgets.pop(identifier, None)

    def clear(self) -> None:
        self._widgets.clear()

    def box_of(self, identifier: str) -> Optional[Rect]:
        widget = self._widgets.get(identifier)
        if widget is None:
            return None
        if widget.width() <= 0 or widget.height() <= 0:
            return None

        if widget is self._root:
            origin = QPoint(0, 0)
        elif self._root.isAncestorOf(widget):
            origin = widget.mapTo(self._root, QPoint(0, 0))
        else:
            logger.debug(f"Widget for {identifier!r} is outside the root widget")
            return None

        return Rect(
            top=origin.y(),
            left=origin.x(),
            width=widget.width(),
            height=widget.height(),
        )

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._widgets
