"""
Module: placement

Purpose:
    Tile placement engine. Resolves where a dragged tile would land from
    geometry alone, and applies that decision to the registry.

Key Functions:
    - resolve(): Registry + dragged tile + offset -> Decision | None
    - apply(): Registry + dragged tile + Decision -> Registry
    - indicator_for(): Decision -> preview line

Key Classes:
    - PlacementConfig / EdgeThresholds: Block/inline thresholds
    - GeometryProvider / MappingGeometryProvider: Box queries
    - Decision, Strategy, Direction: Resolver output
    - EstimationPublisher: Live preview notifications
"""

from .config import DEFAULT_PLACEMENT_CONFIG, EdgeThresholds, PlacementConfig
from .geometry import GeometryProvider, MappingGeometryProvider, row_snapshot
from .models import Decision, Direction, EnhancedTile, Strategy
from .resolver import enhance_tile, resolve
from .executor import apply, insertion_index
from .estimation import EstimationPublisher, InsertIndicator, indicator_for

__all__ = [
    # Config
    "DEFAULT_PLACEMENT_CONFIG",
    "EdgeThresholds",
    "PlacementConfig",
    # Geometry
    "GeometryProvider",
    "MappingGeometryProvider",
    "row_snapshot",
    # Models
    "Decision",
    "Direction",
    "EnhancedTile",
    "Strategy",
    # Functions
    "enhance_tile",
    "resolve",
    "apply",
    "insertion_index",
    # Estimation
    "EstimationPublisher",
    "InsertIndicator",
    "indicator_for",
]
