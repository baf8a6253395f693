"""Choosers selecting components by their type tag."""

from ..hal.interfaces.widget_tree import IComponent
from ..model.component_type import ComponentType, type_names
from .component_chooser import UNLIMITED_DEPTH, ComponentChooser


class ByComponentTypeChooser(ComponentChooser):
    """Select components whose unqualified type name is one of the given types.

    Example:
        >>> chooser = ByComponentTypeChooser(ComponentType.TEXT_FIELD, ComponentType.TEXT_AREA)
        >>> chooser = ByComponentTypeChooser(ALL_TEXTFIELD_TYPES, max_depth=2)
    """

    def __init__(self, *types: ComponentType | str | frozenset[str], max_depth: int = UNLIMITED_DEPTH) -> None:
        super().__init__(max_depth)
        self._types = type_names(*types)

    @property
    def types(self) -> frozenset[str]:
        return self._types

    def check_component(self, component: IComponent) -> bool:
        return component.base_type in self._types

    def get_description(self) -> str:
        return "type in " + ", ".join(sorted(self._types))


class ByClassChooser(ComponentChooser):
    """Select components whose full type tag equals one of the given class names.

    Unlike ``ByComponentTypeChooser`` the namespace is significant, so two
    toolkit classes with the same simple name can be told apart.
    """

    def __init__(self, *class_names: str, max_depth: int = UNLIMITED_DEPTH) -> None:
        super().__init__(max_depth)
        self._class_names = frozenset(class_names)

    @property
    def class_names(self) -> frozenset[str]:
        return self._class_names

    def check_component(self, component: IComponent) -> bool:
        return component.type_tag in self._class_names

    def get_description(self) -> str:
        return "class in " + ", ".join(sorted(self._class_names))
