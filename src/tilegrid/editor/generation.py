"""
Module: editor.generation

Purpose:
    Build starter registries: one tile per row, each with a random
    minimum height and background colour, for demos and fresh editors.

Key Functions:
    - generate_groups(): Registry of `count` single-tile rows
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from tilegrid.core.models import Registry, Tile, TileGroup
from tilegrid.core.utils import generate_identifier

logger = logging.getLogger(__name__)

MIN_TILE_HEIGHT_PX = 60
MAX_TILE_HEIGHT_PX = 300


def random_min_height(rng: random.Random, low: int = MIN_TILE_HEIGHT_PX, high: int = MAX_TILE_HEIGHT_PX) -> int:
    """Random height clamped into [low, high]."""
    return min(max(round(rng.random() * high), low), high)


def random_colour(rng: random.Random) -> str:
    """Random "#RRGGBB" colour in upper case."""
    return f"#{rng.randrange(0x1000000):06X}"


def _unique(rng: random.Random, used: set[str]) -> str:
    identifier = generate_identifier(rng)
    while identifier in used:
        identifier = generate_identifier(rng)
    used.add(identifier)
    return identifier


def generate_groups(count: int, *, rng: Optional[random.Random] = None) -> Registry:
    """
    Create a registry of `count` rows holding one tile each.

    Args:
        count: Number of rows (and tiles) to create
        rng: Random source; pass a seeded Random for a reproducible layout

    Returns:
        Registry with unique group and tile identifiers

    Example:
        >>> registry = generate_groups(3, rng=random.Random(7))
        >>> len(registry), registry.total_tile_count
        (3, 3)
    """
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")

    rng = rng or random.Random()
    used: set[str] = set()
    groups = []
    for _ in range(count):
        tile = Tile(
            identifier=_unique(rng, used),
            style={
                "min_height": f"{random_min_height(rng)}px",
                "background_color": random_colour(rng),
            },
        )
        groups.append(TileGroup(_unique(rng, used), (tile,)))

    logger.debug(f"Generated {count} single-tile groups")
    return Registry(tuple(groups))
