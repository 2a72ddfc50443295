"""
Module: editor

Purpose:
    Editor-level orchestration around the placement engine.

Key Classes:
    - EditorSession: Drag move / drop / cancel handling

Key Functions:
    - generate_groups(): Starter registry of single-tile rows
"""

from .generation import generate_groups
from .session import EditorSession

__all__ = [
    "EditorSession",
    "generate_groups",
]
