"""Table cell classification.

Separates fields laid out as a repeating table column from standalone
fields. A table column shows the same labelled field stacked vertically at
the same x coordinate, one per row; a standalone field has a unique
(x, label) pair. This repetition is the only table signal available, since
the toolkit exposes no table model.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..hal.interfaces.widget_tree import IComponent
from ..naming.display_names import get_accessible_text
from .ordering import sort_reading_order

logger = logging.getLogger(__name__)


class TableFieldClassifier:
    """Classify fields as table cells or standalone fields.

    Example:
        >>> classifier = TableFieldClassifier()
        >>> plain = classifier.purge_table_fields(fields)
        >>> cells = classifier.table_fields(fields)
    """

    def __init__(self, threshold: int | None = None) -> None:
        """Initialize the classifier.

        Args:
            threshold: Two stacked fields belong to one column when
                ``|dy| - height < threshold``; defaults to the settings value
        """
        self.threshold = get_settings().table_cell_threshold if threshold is None else threshold

    def is_table_cell(self, component: IComponent, components: list[IComponent]) -> bool:
        """Check if a component repeats vertically within the given components.

        Args:
            component: Component to classify
            components: All candidate fields of the context

        Returns:
            True if another component shares its x coordinate and accessible
            text and sits within one component height of it
        """
        label = get_accessible_text(component)
        if label is None:
            return False

        bounds = component.get_bounds()
        for other in components:
            if other is component:
                continue

            other_bounds = other.get_bounds()
            if bounds.x != other_bounds.x:
                continue

            # only fields that are really close are taken into account
            delta_y = bounds.y - other_bounds.y
            if abs(delta_y) - bounds.height < self.threshold:
                if get_accessible_text(other) == label:
                    return True

        return False

    def purge_table_fields(self, components: list[IComponent]) -> list[IComponent]:
        """Remove all fields organized in a table layout.

        Args:
            components: Fields in traversal order

        Returns:
            The standalone fields, traversal order preserved
        """
        result = [c for c in components if not self.is_table_cell(c, components)]
        logger.debug(f"{len(components) - len(result)} of {len(components)} fields are table cells")
        return result

    def table_fields(self, components: list[IComponent]) -> list[IComponent]:
        """Keep only the fields organized in a table layout.

        Args:
            components: Fields in traversal order

        Returns:
            The table cells sorted in reading order, so rows come out in sequence
        """
        plain = self.purge_table_fields(components)
        plain_ids = {id(c) for c in plain}
        return sort_reading_order([c for c in components if id(c) not in plain_ids])
