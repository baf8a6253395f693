"""Synthetic names for anonymous components.

Test scripts address components by name. Components the application left
unnamed receive deterministic names (``_TextField1``, ``_TextField2``...) so
the same component gets the same name on every run.
"""

import logging

from ..hal.interfaces.widget_tree import IComponent
from ..model.component_type import base_type_name

logger = logging.getLogger(__name__)


class NamingSession:
    """Per-type counters for one auto-naming pass.

    Counters are global per base type for the whole pass, not per parent.
    A session is created for a single pass and discarded afterwards; it is
    not safe to share between threads.

    Example:
        >>> session = NamingSession()
        >>> session.next_name("Button")
        '_Button1'
        >>> session.next_name("pkg.Button")
        '_Button2'
    """

    def __init__(self) -> None:
        """Initialize the session with empty counters."""
        self._counters: dict[str, int] = {}

    def next_name(self, type_tag: str) -> str:
        """Reserve the next name for a type.

        Args:
            type_tag: Type tag, namespace qualification is ignored

        Returns:
            Synthetic name such as ``_Button3``
        """
        base_name = base_type_name(type_tag)
        count = self._counters.get(base_name, 0) + 1
        self._counters[base_name] = count
        return f"_{base_name}{count}"

    def count(self, type_tag: str) -> int:
        """Number of names handed out for a type in this session."""
        return self._counters.get(base_type_name(type_tag), 0)

    @property
    def total(self) -> int:
        """Total number of names handed out in this session."""
        return sum(self._counters.values())


def assign_missing_names(root: IComponent, session: NamingSession | None = None) -> int:
    """Name every unnamed component of the tree in pre-order.

    Args:
        root: Root of the tree; it is named too if anonymous
        session: Counters to use; a fresh session when omitted

    Returns:
        Number of names assigned
    """
    session = session or NamingSession()
    assigned = 0

    stack: list[IComponent] = [root]
    while stack:
        component = stack.pop()
        if component.get_name() is None:
            name = session.next_name(component.type_tag)
            component.set_name(name)
            assigned += 1
        if component.is_container():
            # reversed so children are visited in declaration order
            stack.extend(reversed(component.get_children()))

    logger.debug(f"Assigned {assigned} missing component names")
    return assigned
