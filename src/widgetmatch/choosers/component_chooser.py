"""Base chooser interface for tree search.

A chooser is a predicate over a single component plus a depth cutoff that
limits how many container levels a search descends.
"""

from abc import ABC, abstractmethod

from ..hal.interfaces.widget_tree import IComponent

UNLIMITED_DEPTH = -1


class ComponentChooser(ABC):
    """Abstract base class for component choosers.

    Choosers hold no state besides their criteria, so one instance can be
    reused across any number of searches.
    """

    def __init__(self, max_depth: int = UNLIMITED_DEPTH) -> None:
        """Initialize the chooser.

        Args:
            max_depth: Number of container levels a search may descend,
                -1 for no limit

        Raises:
            ValueError: If max_depth is below -1
        """
        if max_depth < UNLIMITED_DEPTH:
            raise ValueError(f"max_depth must be -1 or non-negative, got {max_depth}")
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        """Depth cutoff, -1 for no limit."""
        return self._max_depth

    def allows_descent(self, level: int) -> bool:
        """Check if a search at the given level may descend one level further."""
        return self._max_depth == UNLIMITED_DEPTH or level < self._max_depth

    @abstractmethod
    def check_component(self, component: IComponent) -> bool:
        """Check if the component satisfies this chooser.

        Args:
            component: Component to test

        Returns:
            True if the component is selected
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Describe the criteria for log and error messages."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_description()}, max_depth={self._max_depth})"
