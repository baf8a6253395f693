"""Adapter interfaces consumed by the matching engine."""

from .widget_tree import (
    ACCESSIBLE_DESCRIPTION,
    CHECKED,
    EDITABLE,
    LABEL,
    TEXT,
    TOOLTIP,
    TREE_ROOT,
    IComponent,
    ITreeItem,
    MouseButton,
)

__all__ = [
    "IComponent",
    "ITreeItem",
    "MouseButton",
    "LABEL",
    "ACCESSIBLE_DESCRIPTION",
    "TOOLTIP",
    "TEXT",
    "EDITABLE",
    "CHECKED",
    "TREE_ROOT",
]
