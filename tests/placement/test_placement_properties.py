"""
Property and scenario tests for the resolve -> apply pipeline.

Each check re-lays out the registry with row_snapshot() after every move,
the way a host re-measures after a re-render.
"""

import itertools
import random

import pytest

from tilegrid.core.models import Offset
from tilegrid.placement import Direction, Strategy, apply, resolve, row_snapshot

ROWS = [["a", "b", "c"], ["d"], ["e", "f"], ["g"]]

OFFSETS = [
    Offset(dx, dy)
    for dx, dy in itertools.product((-250, -110, -40, 0, 35, 120, 260), (-320, -190, -90, -15, 0, 25, 95, 180, 330))
]


def _tile_ids(registry):
    return sorted(t.identifier for t in registry.iter_tiles())


class TestInvariants:
    """Invariants that hold for every offset and every tile."""

    @pytest.mark.parametrize("tile_id", [t for row in ROWS for t in row])
    def test_when_any_offset_applied_then_tiles_conserved(self, make_layout, tile_id):
        registry, geometry = make_layout(ROWS)

        for offset in OFFSETS:
            decision = resolve(registry, tile_id, offset, geometry)
            result = apply(registry, tile_id, decision)

            assert result.total_tile_count == registry.total_tile_count
            assert _tile_ids(result) == _tile_ids(registry)
            assert all(len(group.tiles) >= 1 for group in result.groups)

    def test_when_many_random_drags_then_no_empty_groups(self, make_layout):
        registry, geometry = make_layout(ROWS)
        rng = random.Random(1234)
        tile_ids = _tile_ids(registry)

        for _ in range(200):
            tile_id = rng.choice(tile_ids)
            offset = Offset(rng.uniform(-300, 300), rng.uniform(-400, 400))
            registry = apply(registry, tile_id, resolve(registry, tile_id, offset, geometry))
            geometry = row_snapshot(registry)

            assert _tile_ids(registry) == tile_ids
            assert all(group.tiles for group in registry.groups)
            assert len(set(registry.group_ids)) == len(registry.group_ids)

    def test_when_tile_unknown_then_apply_is_identity(self, make_layout):
        registry, geometry = make_layout(ROWS)
        decision = resolve(registry, "a", Offset(0, 100), geometry)

        assert apply(registry, "nonexistent-id", decision) == registry

    def test_when_drag_abandoned_then_registry_unchanged(self, make_layout):
        """Resolving alone never changes anything."""
        registry, geometry = make_layout(ROWS)
        snapshot = registry.to_dict()

        for offset in OFFSETS:
            resolve(registry, "e", offset, geometry)

        assert registry.to_dict() == snapshot


class TestScenarios:
    """End-to-end drag scenarios."""

    def test_block_insert_above_next_row(self, make_layout):
        registry, geometry = make_layout([["a"], ["b"]])

        decision = resolve(registry, "a", Offset(0, 60), geometry)
        result = apply(registry, "a", decision)

        assert decision.strategy is Strategy.BLOCK
        assert decision.group.identifier == "g2"
        assert decision.direction is Direction.TOP
        assert [[t.identifier for t in g.tiles] for g in result.groups] == [["a"], ["b"]]
        assert result.groups[1].identifier == "g2"
        assert result.find_group("g1") is None
        assert result.total_tile_count == 2

    def test_inline_right_of_sibling(self, make_layout):
        registry, geometry = make_layout([["a", "b"]])

        decision = resolve(registry, "a", Offset(110, 0), geometry)
        result = apply(registry, "a", decision)

        assert decision.strategy is Strategy.INLINE
        assert decision.closest_tile.identifier == "b"
        assert decision.direction is Direction.RIGHT
        assert [t.identifier for t in result.groups[0].tiles] == ["b", "a"]

    def test_single_tile_row_dropped_on_itself(self, make_layout):
        registry, geometry = make_layout([["a"]])

        decision = resolve(registry, "a", Offset(2, 3), geometry)
        result = apply(registry, "a", decision)

        assert decision.strategy is Strategy.BLOCK
        assert result == registry
        assert result.group_ids == ("g1",)

    def test_merge_row_into_row_above(self, make_layout):
        """A lone tile dropped inside the row above joins it, right of b."""
        registry, geometry = make_layout([["a", "b"], ["c"]])

        result = apply(registry, "c", resolve(registry, "c", Offset(110, -100), geometry))

        assert [[t.identifier for t in g.tiles] for g in result.groups] == [["a", "b", "c"]]

    def test_split_tile_out_below(self, make_layout):
        registry, geometry = make_layout([["a", "b"], ["c"]])

        result = apply(registry, "b", resolve(registry, "b", Offset(-100, 190), geometry))

        assert [[t.identifier for t in g.tiles] for g in result.groups] == [["a"], ["c"], ["b"]]
