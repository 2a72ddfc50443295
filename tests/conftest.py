import os
import sys
from pathlib import Path

import pytest

# Qt widgets in tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import tilegrid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tilegrid.core.models import Registry, Tile, TileGroup  # noqa: E402
from tilegrid.placement import row_snapshot  # noqa: E402


def build_registry(rows):
    """Registry from nested tile ids; groups are named g1, g2, ..."""
    return Registry(tuple(
        TileGroup(f"g{index}", tuple(Tile(tile_id) for tile_id in row))
        for index, row in enumerate(rows, start=1)
    ))


# Common test fixtures
@pytest.fixture
def make_registry():
    """Factory: [["a"], ["b", "c"]] -> Registry(g1[a], g2[b, c])."""
    return build_registry


@pytest.fixture
def make_layout():
    """Factory returning (registry, geometry) laid out as 100x100 tiles in stacked rows."""
    def _create(rows, **kwargs):
        registry = build_registry(rows)
        return registry, row_snapshot(registry, **kwargs)
    return _create
