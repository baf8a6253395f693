"""Operator for tree (navigator) widgets."""

from typing import Any

from ..choosers import ByComponentTypeChooser, ComponentChooser
from ..exceptions import AdapterAccessError, NoMatchException
from ..hal.interfaces.widget_tree import TREE_ROOT, IComponent, ITreeItem
from ..logging import get_logger
from ..model.component_type import ComponentType
from ..search import find_first_component
from ..util.text_util import LEVEL_SEPARATOR, get_first_segment, get_next_segments, matches

logger = get_logger(__name__)


class TreeOperator:
    """Select entries of the first tree widget in a context.

    Example:
        >>> TreeOperator(window).select("Orders > 2024 > Open")
    """

    def __init__(self, context: IComponent, chooser: ComponentChooser | None = None) -> None:
        """Locate the tree widget.

        Args:
            context: Container to search in
            chooser: Criteria for the tree component; the first tree by default

        Raises:
            NoMatchException: If no visible tree exists in the context
        """
        chooser = chooser or ByComponentTypeChooser(ComponentType.TREE)
        tree = find_first_component(context, chooser)
        if tree is None:
            raise NoMatchException(f"No tree found for {chooser.get_description()}")
        self._tree = tree

    def get_source(self) -> IComponent:
        return self._tree

    def select(self, path: str) -> None:
        """Select the item at the given path.

        Collapsed intermediate items are expanded on the way down.

        Args:
            path: Item labels separated by ``>``, e.g. ``level1 > level2 > level3``;
                labels may contain wildcards

        Raises:
            NoMatchException: If any level of the path is missing
        """
        try:
            root: Any = self._tree.read_property(TREE_ROOT)
        except AdapterAccessError:
            root = None
        if not isinstance(root, ITreeItem):
            raise NoMatchException(f"Tree {self._tree.type_tag} exposes no items", criteria=path)

        item = self._find_tree_item(root, path)
        if item is None:
            raise NoMatchException(f"Could not find tree path {path}", criteria=path)

        item.select()
        logger.info("tree_item_selected", path=path)

    def _find_tree_item(self, parent_item: ITreeItem, path: str) -> ITreeItem | None:
        is_last_level = LEVEL_SEPARATOR not in path
        label_to_select = get_first_segment(path)

        for tree_item in parent_item.get_items():
            item_label = tree_item.get_label()
            logger.debug("tree_item_found", label=item_label, expanded=tree_item.is_expanded())

            if not matches(item_label, label_to_select):
                continue

            if is_last_level:
                return tree_item

            if not tree_item.is_expanded():
                tree_item.set_expanded(True)
                logger.debug("tree_item_expanded", label=item_label, expanded=tree_item.is_expanded())
            return self._find_tree_item(tree_item, get_next_segments(path))

        return None
