"""Depth-first search of a widget tree.

The walk is pre-order and prunes on match: once a component satisfies the
chooser its subtree is not searched, so a result never contains a
descendant of another result. Matching components that are not showing are
skipped silently. Results are never cached, each call reads the live tree.
"""

import logging

from ..choosers.component_chooser import ComponentChooser
from ..geometry.ordering import sort_reading_order
from ..hal.interfaces.widget_tree import IComponent

logger = logging.getLogger(__name__)


def find_components(root: IComponent, chooser: ComponentChooser) -> list[IComponent]:
    """Find all visible components matching the chooser.

    Args:
        root: Component to search from (included in the search)
        chooser: Selection criteria and depth cutoff

    Returns:
        Matches in pre-order, left-to-right traversal order
    """
    result: list[IComponent] = []
    _collect(root, chooser, 0, result)
    logger.debug(f"Found {len(result)} components for {chooser!r}")
    return result


def _collect(component: IComponent, chooser: ComponentChooser, level: int, result: list[IComponent]) -> None:
    if chooser.check_component(component):
        # components that are not visible in the UI are ignored
        if component.is_showing():
            result.append(component)
    elif component.is_container() and chooser.allows_descent(level):
        for child in component.get_children():
            _collect(child, chooser, level + 1, result)


def find_and_sort_components(root: IComponent, chooser: ComponentChooser) -> list[IComponent]:
    """Find all visible components matching the chooser, in reading order.

    Args:
        root: Component to search from
        chooser: Selection criteria and depth cutoff

    Returns:
        Matches sorted top-to-bottom, then left-to-right
    """
    return sort_reading_order(find_components(root, chooser))


def find_first_component(root: IComponent, chooser: ComponentChooser) -> IComponent | None:
    """Find the first visible match in traversal order, or None."""
    matches = find_components(root, chooser)
    return matches[0] if matches else None


def iter_tree(root: IComponent):
    """Yield ``(level, component)`` for the whole tree in pre-order."""
    stack: list[tuple[int, IComponent]] = [(0, root)]
    while stack:
        level, component = stack.pop()
        yield level, component
        if component.is_container():
            stack.extend((level + 1, child) for child in reversed(component.get_children()))
