"""MockComponent - in-memory widget tree adapter.

Provides a widget tree that lives entirely in memory. It implements the full
``IComponent`` interface and records every dispatched event, which enables:
- Testing search and row inference without a running UI
- Dry runs of test scripts against a captured layout
- Verifying that the correct clicks and key presses were dispatched
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import AdapterAccessError
from ..hal.interfaces.widget_tree import (
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
from ..model.bounds import Bounds

logger = logging.getLogger(__name__)


class MockComponent(IComponent):
    """Mock component implementation.

    Holds its geometry and properties as plain attributes. Clicking a mock
    checkbox toggles its checked state, as the real widget would.

    Example:
        panel = MockComponent("Panel", 0, 0, 400, 300)
        field = panel.add(MockComponent("TextField", 10, 10, 100, 20, text="Alice"))
        field.dispatch_mouse_click()
        assert field.events == [{"type": "click", "button": "left", "x": 5, "y": 5}]
    """

    def __init__(
        self,
        type_tag: str,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        *,
        name: str | None = None,
        visible: bool = True,
        container: bool | None = None,
        label: str | None = None,
        accessible_description: str | None = None,
        tooltip: str | None = None,
        text: str | None = None,
        editable: bool | None = None,
        checked: bool | None = None,
        tree_root: ITreeItem | None = None,
        children: list[MockComponent] | None = None,
        failing_properties: set[str] | None = None,
    ) -> None:
        """Initialize MockComponent.

        Args:
            type_tag: Type tag, optionally namespace-qualified
            x: Window-relative x coordinate
            y: Window-relative y coordinate
            width: Width in pixels
            height: Height in pixels
            name: Assigned name
            visible: Whether the component is showing
            container: Whether the component can hold children; defaults to
                True when children are given
            label: Visible label (buttons, menus)
            accessible_description: Accessible description
            tooltip: Tooltip text
            text: Current text value
            editable: Editable flag for text entry types
            checked: Checked state for checkboxes
            tree_root: Root item for tree widgets
            children: Initial children
            failing_properties: Property names whose reads raise AdapterAccessError
        """
        self._type_tag = type_tag
        self.bounds = Bounds(x, y, width, height)
        self.name = name
        self.visible = visible
        self.parent: MockComponent | None = None
        self.children: list[MockComponent] = []
        self._container = container
        self.properties: dict[str, Any] = {
            LABEL: label,
            ACCESSIBLE_DESCRIPTION: accessible_description,
            TOOLTIP: tooltip,
            TEXT: text,
            EDITABLE: editable,
            CHECKED: checked,
            TREE_ROOT: tree_root,
        }
        self.failing_properties = set(failing_properties or ())
        self.events: list[dict[str, Any]] = []

        for child in children or []:
            self.add(child)

    def add(self, child: MockComponent) -> MockComponent:
        """Append a child and return it."""
        child.parent = self
        self.children.append(child)
        return child

    @property
    def type_tag(self) -> str:
        return self._type_tag

    def get_bounds(self) -> Bounds:
        return self.bounds

    def is_showing(self) -> bool:
        if not self.visible:
            return False
        return self.parent is None or self.parent.is_showing()

    def get_parent(self) -> MockComponent | None:
        return self.parent

    def get_children(self) -> list[IComponent]:
        return list(self.children)

    def is_container(self) -> bool:
        if self._container is not None:
            return self._container
        return bool(self.children)

    def get_name(self) -> str | None:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def read_property(self, name: str) -> Any:
        if name in self.failing_properties:
            raise AdapterAccessError(name)
        return self.properties.get(name)

    def set_text(self, value: str) -> None:
        logger.debug(f"MockComponent.set_text: {self._type_tag} <- '{value}'")
        self.properties[TEXT] = value
        self.events.append({"type": "set_text", "value": value})

    def dispatch_mouse_click(self, button: MouseButton = MouseButton.LEFT, x: int = 5, y: int = 5) -> None:
        logger.debug(f"MockComponent.click: {self._type_tag} @ {self.bounds}")
        self.events.append({"type": "click", "button": button.value, "x": x, "y": y})
        if button == MouseButton.LEFT and self.properties[CHECKED] is not None:
            self.properties[CHECKED] = not self.properties[CHECKED]

    def dispatch_key(self, key: str) -> None:
        logger.debug(f"MockComponent.key: {self._type_tag} <- {key}")
        self.events.append({"type": "key", "key": key})

    def __repr__(self) -> str:
        return f"MockComponent({self._type_tag!r}, {self.bounds.x}, {self.bounds.y}, name={self.name!r})"


class MockTreeItem(ITreeItem):
    """Mock tree item implementation.

    Tracks expansion and selection so tests can verify navigation.
    """

    def __init__(self, label: str | None, items: list[MockTreeItem] | None = None, expanded: bool = False):
        self.label = label
        self.items: list[MockTreeItem] = list(items or [])
        self.expanded = expanded
        self.selected = False

    def get_label(self) -> str | None:
        return self.label

    def is_expanded(self) -> bool:
        return self.expanded

    def set_expanded(self, expanded: bool) -> None:
        self.expanded = expanded

    def get_items(self) -> list[ITreeItem]:
        return list(self.items)

    def select(self) -> None:
        self.selected = True

    def __repr__(self) -> str:
        return f"MockTreeItem({self.label!r})"
