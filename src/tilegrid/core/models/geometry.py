"""
Module: geometry

Purpose:
    Geometry value types consumed by the placement engine. All boxes share
    one coordinate space (tiles and groups alike) and are produced by a
    geometry provider, never by the engine itself.

Key Classes:
    - Rect: Bounding box (top, left, width, height)
    - Point: 2-D position
    - Offset: 2-D displacement supplied by the drag tracker

Dependencies:
    - dataclasses (std)

Used By:
    - placement.geometry: GeometryProvider implementations
    - placement.resolver: Center and threshold calculations
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from tilegrid.placement.config import EdgeThresholds


@dataclass(frozen=True, slots=True)
class Point:
    """A position in the shared coordinate space."""

    x: float
    y: float

    def __add__(self, other: Offset) -> Point:
        if not isinstance(other, Offset):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True, slots=True)
class Offset:
    """
    Displacement of the dragged tile's center from its resting position.

    Example:
        >>> Point(10, 10) + Offset(5, -2)
        Point(x=15, y=8)
    """

    x: float = 0
    y: float = 0

    @classmethod
    def coerce(cls, value: Offset | Sequence[float] | dict) -> Offset:
        """Accept an Offset, an (x, y) pair or a {"x", "y"} mapping."""
        if isinstance(value, Offset):
            return value
        if isinstance(value, dict):
            return cls(x=value.get("x", 0) or 0, y=value.get("y", 0) or 0)
        x, y = value
        return cls(x=x, y=y)


@dataclass(frozen=True, slots=True)
class Rect:
    """
    On-screen bounding box of a tile or group.

    A rect with zero (or negative) width or height has not been measured
    yet, e.g. on the first frame after mount. The resolver refuses to make
    decisions from such boxes.

    Attributes:
        top: Y-coordinate of the top edge
        left: X-coordinate of the left edge
        width: Horizontal extent
        height: Vertical extent

    Example:
        >>> box = Rect(top=0, left=0, width=100, height=40)
        >>> box.center
        Point(x=50.0, y=20.0)
    """

    top: float
    left: float
    width: float
    height: float

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def center(self) -> Point:
        """Midpoint of the box."""
        return Point(self.left + self.width / 2, self.top + self.height / 2)

    @property
    def is_measured(self) -> bool:
        """False for degenerate boxes that carry no usable geometry."""
        return self.width > 0 and self.height > 0

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def inset(self, thresholds: EdgeThresholds) -> Rect:
        """
        Shrink the box by a per-edge amount.

        The result may be degenerate when the thresholds exceed the box;
        contains() then rejects every point.
        """
        return Rect(
            top=self.top + thresholds.top,
            left=self.left + thresholds.left,
            width=self.width - thresholds.left - thresholds.right,
            height=self.height - thresholds.top - thresholds.bottom,
        )

    def contains(self, point: Point) -> bool:
        """
        Check whether a point lies within the box, edges included.

        Args:
            point: Point to test

        Returns:
            True if left <= x <= right and top <= y <= bottom
        """
        if self.width < 0 or self.height < 0:
            return False
        return (
            self.top <= point.y <= self.bottom
            and self.left <= point.x <= self.right
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "left": self.left,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        return cls(
            top=data["top"],
            left=data["left"],
            width=data["width"],
            height=data["height"],
        )

    def __repr__(self) -> str:
        return f"Rect({self.top}, {self.left}, {self.width}x{self.height})"
