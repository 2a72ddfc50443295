"""PySide6 adapters for the placement engine."""

from .bridge import EditorBridge
from .geometry import WidgetGeometryProvider

__all__ = ["EditorBridge", "WidgetGeometryProvider"]
