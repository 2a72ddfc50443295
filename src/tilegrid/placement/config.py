"""
Module: placement.config

Purpose:
    Configuration for the placement resolver. Defines the per-edge
    thresholds that separate "drop into this row" (inline) from
    "drop as a new row" (block).

Key Classes:
    - EdgeThresholds: Per-edge inset in pixels
    - PlacementConfig: Immutable resolver configuration

Dependencies:
    - dataclasses (std)

Used By:
    - placement.resolver: Strategy decision
    - editor.session: Passed through to resolve()
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


# Vertical band reserved for block placement above/below a row
DEFAULT_VERTICAL_THRESHOLD_PX = 20
DEFAULT_HORIZONTAL_THRESHOLD_PX = 0


@dataclass(frozen=True)
class EdgeThresholds:
    """
    Per-edge inset applied to a group's box before the inline test.

    A dragged center inside the inset box joins the row; anywhere else it
    starts a new row above or below.

    Attributes:
        top: Inset from the top edge (px)
        bottom: Inset from the bottom edge (px)
        left: Inset from the left edge (px)
        right: Inset from the right edge (px)
    """

    top: float = DEFAULT_VERTICAL_THRESHOLD_PX
    bottom: float = DEFAULT_VERTICAL_THRESHOLD_PX
    left: float = DEFAULT_HORIZONTAL_THRESHOLD_PX
    right: float = DEFAULT_HORIZONTAL_THRESHOLD_PX

    def __post_init__(self) -> None:
        """Validate thresholds on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} threshold must be non-negative: {value}")

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> EdgeThresholds:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown threshold keys: {sorted(unknown)}")
        return cls(**data)


@dataclass(frozen=True)
class PlacementConfig:
    """
    Configuration for placement resolution (immutable).

    Attributes:
        thresholds: Edge insets used for the block/inline decision

    Example:
        >>> config = PlacementConfig(thresholds=EdgeThresholds(top=10, bottom=10))
        >>> config.thresholds.left
        0
    """

    thresholds: EdgeThresholds = field(default_factory=EdgeThresholds)

    def to_dict(self) -> dict:
        return {"thresholds": self.thresholds.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> PlacementConfig:
        unknown = set(data) - {"thresholds"}
        if unknown:
            raise ValueError(f"Unknown placement config keys: {sorted(unknown)}")
        if "thresholds" not in data:
            return cls()
        return cls(thresholds=EdgeThresholds.from_dict(data["thresholds"]))


DEFAULT_PLACEMENT_CONFIG = PlacementConfig()
