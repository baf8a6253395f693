"""Human-readable listings of the components in a context.

These listings help test authors discover the names to use in their
scripts. Every line is logged and also returned to the caller.
"""

from ..choosers import ByComponentTypeChooser
from ..config import get_settings
from ..hal.interfaces.widget_tree import TEXT, IComponent
from ..logging import get_logger
from ..model.component_type import ALL_TEXTFIELD_TYPES, ComponentType
from ..naming.display_names import get_formatted_component_names, is_editable
from ..search import find_and_sort_components, iter_tree

logger = get_logger(__name__)

EDITABLE_MARKER = " [editable] "


class ComponentReporter:
    """Produce listings of a context's components.

    Example:
        >>> reporter = ComponentReporter(window)
        >>> reporter.list_components(ComponentType.PUSH_BUTTON)
        ['10,200   : OK', '80,200   : Cancel']
    """

    def __init__(self, context: IComponent) -> None:
        self._context = context

    def format_location(self, component: IComponent) -> str:
        return component.get_bounds().format_location(get_settings().location_width)

    def _editable_marker(self, component: IComponent) -> str:
        return EDITABLE_MARKER if is_editable(component) else ""

    def _emit(self, lines: list[str]) -> list[str]:
        for line in lines:
            logger.info(line)
        return lines

    def list_components(self, *types: ComponentType | str | frozenset[str]) -> list[str]:
        """List the components of the given types in reading order.

        Each line shows the location, the display names and an editable marker.
        """
        lines = [
            f"{self.format_location(c)} : {get_formatted_component_names(c)}{self._editable_marker(c)}"
            for c in find_and_sort_components(self._context, ByComponentTypeChooser(*types))
        ]
        return self._emit(lines)

    def list_text_fields(self) -> list[str]:
        """List all text fields in reading order, including their current value."""
        lines = []
        for component in find_and_sort_components(self._context, ByComponentTypeChooser(ALL_TEXTFIELD_TYPES)):
            value = component.optional_string(TEXT) or ""
            lines.append(
                f"{self.format_location(component)} : {get_formatted_component_names(component)}"
                f" : {value}{self._editable_marker(component)}"
            )
        return self._emit(lines)

    def list_component_hierarchy(self) -> list[str]:
        """List every component of the context, indented by depth."""
        lines = []
        for level, component in iter_tree(self._context):
            prefix = f"L{level} [{self.format_location(component)}]".ljust(10 + 2 * (level + 1))
            value = component.optional_string(TEXT)
            line = (
                f"{prefix}{component.type_tag}  -  {get_formatted_component_names(component)}"
                f"{self._editable_marker(component)}"
            )
            if value is not None:
                line += f" : {value}"
            lines.append(line)
        return self._emit(lines)
