"""Operator for searching within a context container.

A context is the container (window, dialog, tab page) that test keywords
currently work in. Searches through the context operator never fail on an
empty result; operators built on top of it decide what a missing component
means.
"""

from ..choosers import ByComponentTypeChooser, ComponentChooser
from ..geometry import TableFieldClassifier
from ..hal.interfaces.widget_tree import IComponent
from ..logging import get_logger
from ..model.component_type import ALL_TEXTFIELD_TYPES
from ..naming.auto_naming import NamingSession, assign_missing_names
from ..search import find_and_sort_components, find_components

logger = get_logger(__name__)


class ContextOperator:
    """Search operations over one context container.

    Example:
        >>> context = ContextOperator(window)
        >>> fields = context.find_non_table_text_fields()
        >>> context.find_text_field(ByNameChooser("Customer"))
    """

    def __init__(self, context: IComponent) -> None:
        """Initialize a context operator.

        Args:
            context: Root container of all searches
        """
        self._context = context
        self._classifier = TableFieldClassifier()

    def get_source(self) -> IComponent:
        """Get the component representing the context."""
        return self._context

    def find_components(self, chooser: ComponentChooser) -> list[IComponent]:
        """Find all visible components matching the chooser, in traversal order."""
        return find_components(self._context, chooser)

    def find_and_sort_components(self, chooser: ComponentChooser) -> list[IComponent]:
        """Find all visible components matching the chooser, in reading order."""
        return find_and_sort_components(self._context, chooser)

    def find_text_fields(self) -> list[IComponent]:
        """Find all visible text entry fields, in traversal order."""
        return self.find_components(ByComponentTypeChooser(ALL_TEXTFIELD_TYPES))

    def find_non_table_text_fields(self) -> list[IComponent]:
        """Find the text fields that are not part of a table layout."""
        return self._classifier.purge_table_fields(self.find_text_fields())

    def find_table_text_fields(self) -> list[IComponent]:
        """Find the text fields laid out as table cells, in reading order."""
        return self._classifier.table_fields(self.find_text_fields())

    def find_text_field(self, chooser: ComponentChooser) -> IComponent | None:
        """Find a specific text field outside of table layouts.

        Args:
            chooser: Usually a ByNameChooser

        Returns:
            The first matching standalone field, or None
        """
        for component in self.find_non_table_text_fields():
            if chooser.check_component(component):
                return component
        return None

    def find_table_fields(self, chooser: ComponentChooser) -> list[IComponent]:
        """Find the table cell fields matching the chooser, in reading order."""
        return [c for c in self.find_table_text_fields() if chooser.check_component(c)]

    def init_missing_component_names(self) -> int:
        """Give every unnamed component of the context a synthetic name.

        Returns:
            Number of names assigned
        """
        session = NamingSession()
        assigned = assign_missing_names(self._context, session)
        logger.info("component_names_assigned", count=assigned)
        return assigned
