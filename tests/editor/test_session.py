"""
Unit tests for EditorSession drag handling.
"""

import pytest

from tilegrid.core.models import Offset
from tilegrid.core.schemas import ValidationError
from tilegrid.editor import EditorSession
from tilegrid.placement import (
    Direction,
    EdgeThresholds,
    EstimationPublisher,
    PlacementConfig,
    Strategy,
    row_snapshot,
)


@pytest.fixture
def session(make_layout):
    registry, geometry = make_layout([["a", "b"], ["c"]])
    return EditorSession(registry, geometry)


def _rows(registry):
    return [[t.identifier for t in g.tiles] for g in registry.groups]


class TestHandleTileMove:
    """Live estimation on pointer move."""

    def test_when_moved_then_estimate_published(self, session):
        received = []
        session.publisher.subscribe(received.append)

        decision = session.handle_tile_move("a", Offset(110, 0))

        assert decision.strategy is Strategy.INLINE
        assert decision.direction is Direction.RIGHT
        assert received == [decision]
        assert session.estimation == decision

    def test_when_moved_then_registry_untouched(self, session):
        before = session.registry
        session.handle_tile_move("c", (0, -150))
        assert session.registry is before

    def test_when_tile_unknown_then_estimate_cleared(self, session):
        session.handle_tile_move("a", Offset(110, 0))

        assert session.handle_tile_move("zz", Offset(0, 0)) is None
        assert session.estimation is None

    def test_when_config_given_then_thresholds_applied(self, make_layout):
        registry, geometry = make_layout([["a", "b"], ["c"]])
        session = EditorSession(
            registry, geometry, PlacementConfig(thresholds=EdgeThresholds(left=30, right=30))
        )

        decision = session.handle_tile_move("c", Offset(140, -100))

        assert decision.strategy is Strategy.BLOCK


class TestHandleTileDrop:
    """Committing a drag."""

    def test_when_dropped_then_registry_reordered_and_estimate_cleared(self, session):
        layouts = []
        session.subscribe_layout(layouts.append)
        session.handle_tile_move("a", Offset(110, 0))

        result = session.handle_tile_drop("a", Offset(110, 0))

        assert _rows(result) == [["b", "a"], ["c"]]
        assert session.registry is result
        assert session.estimation is None
        assert layouts == [result]

    def test_when_drop_is_no_op_then_layout_not_notified(self, make_layout):
        registry, geometry = make_layout([["a"]])
        session = EditorSession(registry, geometry)
        layouts = []
        session.subscribe_layout(layouts.append)

        result = session.handle_tile_drop("a", Offset(1, 1))

        assert result is registry
        assert layouts == []

    def test_when_consecutive_drops_with_fresh_geometry_then_each_applies(self, session):
        session.handle_tile_drop("c", Offset(110, -100))  # c joins row 1, right of b
        session.set_geometry(row_snapshot(session.registry))

        session.handle_tile_drop("a", Offset(0, 140))  # a below the only row

        assert _rows(session.registry) == [["b", "c"], ["a"]]

    def test_when_layout_subscriber_raises_then_drop_still_commits(self, session, caplog):
        def broken(_registry):
            raise RuntimeError("boom")

        session.subscribe_layout(broken)

        with caplog.at_level("ERROR", logger="tilegrid.editor.session"):
            result = session.handle_tile_drop("a", Offset(110, 0))

        assert _rows(result) == [["b", "a"], ["c"]]
        assert "Layout subscriber" in caplog.text


class TestCancelAndReplace:
    """Abandoned drags and re-initialisation."""

    def test_cancel_when_drag_in_progress_then_registry_kept(self, session):
        before = session.registry
        session.handle_tile_move("c", Offset(0, -150))

        session.cancel_drag()

        assert session.registry is before
        assert session.estimation is None

    def test_replace_registry_when_called_then_notifies_layout(self, session, make_registry):
        layouts = []
        unsubscribe = session.subscribe_layout(layouts.append)
        replacement = make_registry([["x"]])

        session.replace_registry(replacement)
        unsubscribe()
        session.replace_registry(make_registry([["y"]]))

        assert layouts == [replacement]

    def test_publisher_when_shared_then_used_by_session(self, make_layout):
        registry, geometry = make_layout([["a", "b"]])
        publisher = EstimationPublisher()

        session = EditorSession(registry, geometry, publisher=publisher)
        session.handle_tile_move("a", Offset(110, 0))

        assert publisher.current is not None


class TestFromDict:
    """Building a session from a registry payload."""

    def test_from_dict_when_valid_then_session_ready(self):
        payload = {"groups": [
            {"identifier": "g1", "tiles": [{"identifier": "a"}, {"identifier": "b"}]},
        ]}
        session = EditorSession.from_dict(payload, geometry=None)
        session.set_geometry(row_snapshot(session.registry))

        assert session.handle_tile_move("a", Offset(110, 0)).closest_tile.identifier == "b"

    def test_from_dict_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            EditorSession.from_dict({"groups": [{"identifier": "g1", "tiles": []}]}, geometry=None)
