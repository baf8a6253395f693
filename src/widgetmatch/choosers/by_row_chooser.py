"""Chooser scoping a search to the row of a reference component."""

from ..config import get_settings
from ..geometry.row_geometry import RowGeometry
from ..hal.interfaces.widget_tree import IComponent
from ..model.component_type import ComponentType, type_names
from ..naming.display_names import has_name
from .component_chooser import UNLIMITED_DEPTH, ComponentChooser


class ByRowChooser(ComponentChooser):
    """Select components on the same row as a reference component.

    Used after a row has been located through its key field: the search for
    a named field or checkbox then only considers components in the key
    field's vertical band.
    """

    def __init__(
        self,
        reference: IComponent,
        name: str | None,
        *types: ComponentType | str | frozenset[str],
        max_depth: int = UNLIMITED_DEPTH,
        tolerance: int | None = None,
    ) -> None:
        """Initialize the row chooser.

        Args:
            reference: Component defining the row (usually the key column)
            name: Display name pattern, None to accept any name
            *types: Accepted types, empty for any type
            max_depth: Depth cutoff
            tolerance: Row band; defaults to the configured row band
        """
        super().__init__(max_depth)
        self._reference = reference
        self._name = name
        self._types = type_names(*types)
        self._tolerance = get_settings().row_band_tolerance if tolerance is None else tolerance

    @property
    def reference(self) -> IComponent:
        return self._reference

    def check_component(self, component: IComponent) -> bool:
        if self._types and component.base_type not in self._types:
            return False
        if not RowGeometry.are_aligned_vertically(self._reference, component, self._tolerance):
            return False
        return self._name is None or has_name(component, self._name)

    def get_description(self) -> str:
        description = f"row at y={self._reference.y}"
        if self._name is not None:
            description += f" and name '{self._name}'"
        if self._types:
            description += " and type in " + ", ".join(sorted(self._types))
        return description
