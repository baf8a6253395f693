"""Component choosers for tree search.

This package provides the predicates a tree search applies to each node:

- ComponentChooser: Abstract base class with the depth cutoff
- ByComponentTypeChooser: Select by unqualified type name
- ByClassChooser: Select by fully qualified type tag
- ByNameChooser: Select by display name pattern
- ByRowChooser: Select within the row of a reference component

Example usage:
    >>> from widgetmatch.choosers import ByNameChooser
    >>> from widgetmatch.search import find_components
    >>>
    >>> fields = find_components(window, ByNameChooser("Customer*"))
"""

from .by_name_chooser import ByNameChooser
from .by_row_chooser import ByRowChooser
from .by_type_chooser import ByClassChooser, ByComponentTypeChooser
from .component_chooser import UNLIMITED_DEPTH, ComponentChooser

__all__ = [
    "ComponentChooser",
    "ByComponentTypeChooser",
    "ByClassChooser",
    "ByNameChooser",
    "ByRowChooser",
    "UNLIMITED_DEPTH",
]
