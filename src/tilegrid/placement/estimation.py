"""
Module: placement.estimation

Purpose:
    Surface the live landing estimate to the presentation layer. A decision
    becomes an insert indicator: a horizontal line at the start or end of a
    row (block), or a vertical line at the start or end of a tile (inline).

Key Classes:
    - InsertIndicator: Where to draw the preview line
    - EstimationPublisher: Holds the current decision and notifies subscribers

Key Functions:
    - indicator_for(): Decision -> InsertIndicator

Used By:
    - editor.session
    - gui.bridge: Re-emits estimates as Qt signals
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .models import Decision, Strategy

logger = logging.getLogger(__name__)

EstimationCallback = Callable[[Optional[Decision]], None]


@dataclass(frozen=True)
class InsertIndicator:
    """
    Preview line position.

    Attributes:
        anchor: "group" for block placement, "tile" for inline placement
        anchor_id: Identifier of the group or tile the line attaches to
        edge: "start" (before the anchor) or "end" (after it)
        orientation: "horizontal" between rows, "vertical" between tiles
    """

    anchor: str
    anchor_id: str
    edge: str
    orientation: str

    def to_dict(self) -> dict:
        return {
            "anchor": self.anchor,
            "anchor_id": self.anchor_id,
            "edge": self.edge,
            "orientation": self.orientation,
        }


def indicator_for(decision: Optional[Decision]) -> Optional[InsertIndicator]:
    """Map a decision to its preview line (None for no decision)."""
    if decision is None:
        return None

    edge = "start" if decision.direction.is_before else "end"
    if decision.strategy is Strategy.BLOCK:
        return InsertIndicator("group", decision.group.identifier, edge, "horizontal")
    return InsertIndicator("tile", decision.closest_tile.identifier, edge, "vertical")


class EstimationPublisher:
    """
    Current estimate plus the callbacks interested in it.

    publish() only notifies when the decision actually changed, so a
    stream of identical pointer moves produces a single notification.

    Example:
        >>> publisher = EstimationPublisher()
        >>> unsubscribe = publisher.subscribe(print)
        >>> publisher.publish(decision)
        Decision(block, g2, top)
        >>> unsubscribe()
    """

    def __init__(self) -> None:
        self._current: Optional[Decision] = None
        self._subscribers: List[EstimationCallback] = []

    @property
    def current(self) -> Optional[Decision]:
        return self._current

    @property
    def indicator(self) -> Optional[InsertIndicator]:
        return indicator_for(self._current)

    def subscribe(self, callback: EstimationCallback) -> Callable[[], None]:
        """
        Register a callback for estimate changes.

        Returns:
            Function that removes the callback again
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def publish(self, decision: Optional[Decision]) -> bool:
        """
        Replace the current estimate.

        Returns:
            True if subscribers were notified (the estimate changed)
        """
        if decision == self._current:
            return False
        self._current = decision
        for callback in list(self._subscribers):
            try:
                callback(decision)
            except Exception:
                logger.exception(f"Estimation subscriber {callback!r} failed")
        return True

    def clear(self) -> bool:
        """Drop the current estimate (drag ended or was abandoned)."""
        return self.publish(None)
