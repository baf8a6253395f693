"""Chooser selecting components by display name."""

from ..hal.interfaces.widget_tree import IComponent
from ..model.component_type import ComponentType, type_names
from ..naming.display_names import has_name
from .component_chooser import UNLIMITED_DEPTH, ComponentChooser


class ByNameChooser(ComponentChooser):
    """Select components with a display name matching a wildcard pattern.

    Optionally restricted to a set of types; without types every component
    whose names match is selected.

    Example:
        >>> chooser = ByNameChooser("User*", ComponentType.TEXT_FIELD)
    """

    def __init__(
        self,
        name: str,
        *types: ComponentType | str | frozenset[str],
        max_depth: int = UNLIMITED_DEPTH,
    ) -> None:
        super().__init__(max_depth)
        self._name = name
        self._types = type_names(*types)

    @property
    def name(self) -> str:
        return self._name

    def check_component(self, component: IComponent) -> bool:
        if self._types and component.base_type not in self._types:
            return False
        return has_name(component, self._name)

    def get_description(self) -> str:
        description = f"name '{self._name}'"
        if self._types:
            description += " and type in " + ", ".join(sorted(self._types))
        return description
