"""
Unit tests for the Qt widget geometry provider.
"""

import pytest
from PySide6.QtWidgets import QWidget

from tilegrid.core.models import Offset, Rect
from tilegrid.gui import WidgetGeometryProvider
from tilegrid.placement import Direction, GeometryProvider, Strategy, resolve


@pytest.fixture
def root(qtbot):
    widget = QWidget()
    widget.resize(400, 400)
    qtbot.addWidget(widget)
    return widget


def _child(parent, x, y, w, h):
    widget = QWidget(parent)
    widget.setGeometry(x, y, w, h)
    return widget


class TestWidgetGeometryProvider:
    """Tests for WidgetGeometryProvider.box_of()."""

    def test_box_of_when_direct_child_then_uses_child_geometry(self, root):
        geometry = WidgetGeometryProvider(root)
        geometry.register("g1", _child(root, 10, 20, 300, 100))

        assert geometry.box_of("g1") == Rect(top=20, left=10, width=300, height=100)

    def test_box_of_when_nested_then_mapped_to_root(self, root):
        geometry = WidgetGeometryProvider(root)
        row = _child(root, 0, 100, 300, 80)
        geometry.register("t1", _child(row, 15, 5, 50, 60))

        assert geometry.box_of("t1") == Rect(top=105, left=15, width=50, height=60)

    def test_box_of_when_root_registered_then_origin_is_zero(self, root):
        geometry = WidgetGeometryProvider(root)
        geometry.register("all", root)

        assert geometry.box_of("all") == Rect(0, 0, 400, 400)

    def test_box_of_when_zero_sized_then_none(self, root):
        geometry = WidgetGeometryProvider(root)
        geometry.register("t1", _child(root, 0, 0, 0, 0))

        assert geometry.box_of("t1") is None

    def test_box_of_when_outside_root_then_none(self, root, qtbot):
        stranger = QWidget()
        stranger.resize(50, 50)
        qtbot.addWidget(stranger)
        geometry = WidgetGeometryProvider(root)
        geometry.register("t1", stranger)

        assert geometry.box_of("t1") is None

    def test_unregister_when_called_then_box_unknown(self, root):
        geometry = WidgetGeometryProvider(root)
        geometry.register("t1", _child(root, 0, 0, 10, 10))

        geometry.unregister("t1")
        geometry.unregister("t1")

        assert "t1" not in geometry
        assert geometry.box_of("t1") is None

    def test_protocol_when_checked_then_provider_conforms(self, root):
        assert isinstance(WidgetGeometryProvider(root), GeometryProvider)

    def test_resolve_when_backed_by_widgets_then_decides_from_layout(self, root, make_registry):
        registry = make_registry([["a", "b"], ["c"]])
        geometry = WidgetGeometryProvider(root)
        row1 = _child(root, 0, 0, 200, 100)
        row2 = _child(root, 0, 100, 100, 100)
        geometry.register("g1", row1)
        geometry.register("g2", row2)
        geometry.register("a", _child(row1, 0, 0, 100, 100))
        geometry.register("b", _child(row1, 100, 0, 100, 100))
        geometry.register("c", _child(row2, 0, 0, 100, 100))

        decision = resolve(registry, "c", Offset(110, -100), geometry)

        assert decision.strategy is Strategy.INLINE
        assert decision.closest_tile.identifier == "b"
        assert decision.direction is Direction.RIGHT
