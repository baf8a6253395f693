"""Event dispatch helpers for components."""

import logging

from ..hal.interfaces.widget_tree import IComponent, MouseButton

logger = logging.getLogger(__name__)


def simulate_mouse_click(component: IComponent) -> None:
    """Simulate a left mouse click near the top-left corner of the component."""
    logger.debug(f"Clicking {component.type_tag} @ {component.x},{component.y}")
    component.dispatch_mouse_click(MouseButton.LEFT, 5, 5)


def simulate_key_pressed(component: IComponent, key: str) -> None:
    """Simulate a key press/release pair on the component.

    Args:
        component: Target component
        key: Key name understood by the adapter (e.g. ``TAB``, ``ENTER``)
    """
    logger.debug(f"Pressing {key} on {component.type_tag}")
    component.dispatch_key(key)
