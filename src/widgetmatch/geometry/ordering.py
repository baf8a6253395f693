"""Reading order of components."""

from ..hal.interfaces.widget_tree import IComponent


def reading_order_key(component: IComponent) -> tuple[int, int]:
    """Sort key ordering components top-to-bottom, then left-to-right."""
    bounds = component.get_bounds()
    return (bounds.y, bounds.x)


def sort_reading_order(components: list[IComponent]) -> list[IComponent]:
    """Return the components sorted in reading order (stable for equal origins)."""
    return sorted(components, key=reading_order_key)
