"""Tree search over widget trees."""

from .tree_search import find_and_sort_components, find_components, find_first_component, iter_tree

__all__ = [
    "find_components",
    "find_and_sort_components",
    "find_first_component",
    "iter_tree",
]
