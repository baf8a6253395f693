"""Widget tree adapter interface definition.

This module defines the read-only view of a live widget tree that the
matching engine searches. A concrete adapter wraps one toolkit (a Java
bridge, a native accessibility API, an in-memory mock...) and exposes every
component through ``IComponent``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ...exceptions import AdapterAccessError
from ...model.bounds import Bounds
from ...model.component_type import base_type_name

logger = logging.getLogger(__name__)

# Property names passed to IComponent.read_property
LABEL = "label"
ACCESSIBLE_DESCRIPTION = "accessible_description"
TOOLTIP = "tooltip"
TEXT = "text"
EDITABLE = "editable"
CHECKED = "checked"
TREE_ROOT = "tree_root"


class MouseButton(Enum):
    """Mouse button enumeration."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class IComponent(ABC):
    """Interface for a single component of a live widget tree.

    Structural accessors (type tag, bounds, visibility, children) are
    mandatory. Everything else is read through ``read_property``, which may
    fail on a live component; callers use the typed optional getters, which
    report a failed read as an absent value.

    Example:
        >>> label = component.optional_string(LABEL)
        >>> if label is None:
        ...     label = component.get_name()
    """

    @property
    @abstractmethod
    def type_tag(self) -> str:
        """Type tag of the component, possibly namespace-qualified."""
        ...

    @abstractmethod
    def get_bounds(self) -> Bounds:
        """Get the window-relative bounding box.

        Returns:
            Current bounds of the component
        """
        ...

    @abstractmethod
    def is_showing(self) -> bool:
        """Check if the component is currently visible on screen."""
        ...

    @abstractmethod
    def get_parent(self) -> IComponent | None:
        """Get the parent container, or None for the root."""
        ...

    @abstractmethod
    def get_children(self) -> list[IComponent]:
        """Get the child components in declaration order.

        Returns:
            Children list; empty for leaf components
        """
        ...

    @abstractmethod
    def is_container(self) -> bool:
        """Check if the component can hold children."""
        ...

    @abstractmethod
    def get_name(self) -> str | None:
        """Get the assigned (programmatic) name, if any."""
        ...

    @abstractmethod
    def set_name(self, name: str) -> None:
        """Assign a programmatic name to the component."""
        ...

    @abstractmethod
    def read_property(self, name: str) -> Any:
        """Read a toolkit property from the live component.

        Args:
            name: Property name (LABEL, ACCESSIBLE_DESCRIPTION, TOOLTIP, TEXT...)

        Returns:
            The raw property value, None when the component has no such value

        Raises:
            AdapterAccessError: If the property could not be read
        """
        ...

    @abstractmethod
    def set_text(self, value: str) -> None:
        """Replace the text content of a text entry component."""
        ...

    @abstractmethod
    def dispatch_mouse_click(self, button: MouseButton = MouseButton.LEFT, x: int = 5, y: int = 5) -> None:
        """Dispatch a press/release pair of the given button at a local offset."""
        ...

    @abstractmethod
    def dispatch_key(self, key: str) -> None:
        """Dispatch a key press/release pair to the component."""
        ...

    # Typed optional getters

    def optional_string(self, name: str) -> str | None:
        """Read a string property, reporting failures as absent.

        Args:
            name: Property name

        Returns:
            The string value, or None if absent or unreadable
        """
        try:
            value = self.read_property(name)
        except AdapterAccessError as e:
            logger.debug(f"Property '{name}' unavailable on {self.type_tag}: {e}")
            return None
        return None if value is None else str(value)

    def optional_bool(self, name: str) -> bool | None:
        """Read a boolean property, reporting failures as absent."""
        try:
            value = self.read_property(name)
        except AdapterAccessError as e:
            logger.debug(f"Property '{name}' unavailable on {self.type_tag}: {e}")
            return None
        return None if value is None else bool(value)

    # Convenience geometry accessors

    @property
    def base_type(self) -> str:
        """Type tag with namespace qualification stripped."""
        return base_type_name(self.type_tag)

    @property
    def x(self) -> int:
        return self.get_bounds().x

    @property
    def y(self) -> int:
        return self.get_bounds().y

    @property
    def width(self) -> int:
        return self.get_bounds().width

    @property
    def height(self) -> int:
        return self.get_bounds().height


class ITreeItem(ABC):
    """Interface for one item of a tree widget (outline/navigator control).

    Tree widgets do not expose their items as components, so adapters
    provide them through this interface via ``IComponent.read_property``
    with the ``tree_root`` property.
    """

    @abstractmethod
    def get_label(self) -> str | None:
        """Get the visible label of the item."""
        ...

    @abstractmethod
    def is_expanded(self) -> bool:
        """Check if the item's children are shown."""
        ...

    @abstractmethod
    def set_expanded(self, expanded: bool) -> None:
        """Expand or collapse the item."""
        ...

    @abstractmethod
    def get_items(self) -> list[ITreeItem]:
        """Get the child items in display order."""
        ...

    @abstractmethod
    def select(self) -> None:
        """Make this item the tree's selection."""
        ...

