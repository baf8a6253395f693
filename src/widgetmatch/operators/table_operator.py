"""Operator for tables without a table model.

Rows are located by content: the caller lists the expected values of
consecutive columns and the operator searches for text fields showing those
values, chained left to right by adjacency.
"""

from collections.abc import Sequence

from ..choosers import ByRowChooser
from ..config import get_settings
from ..exceptions import AmbiguousMatchException, NoMatchException
from ..geometry import RowGeometry, sort_reading_order
from ..hal.interfaces.widget_tree import IComponent
from ..logging import get_logger
from ..model.component_type import ALL_TEXTFIELD_TYPES, ComponentType
from ..util.text_util import format_values, matches
from .checkbox_operator import CheckboxOperator
from .component_actions import simulate_mouse_click
from .context_operator import ContextOperator
from .text_field_operator import TextFieldOperator

logger = get_logger(__name__)


class TableOperator(ContextOperator):
    """Row based operations on table-like layouts of a context.

    Example:
        >>> table = TableOperator(window)
        >>> table.select_row(["Alice", "42"])
        >>> table.set_row_field("Comment", "late", ["Alice", "42"])
        >>> table.select_row_checkbox(1, ["Alice"])
    """

    def find_row(self, column_values: Sequence[str]) -> IComponent:
        """Locate a matching row by field values.

        Candidates for every column are collected first. Then, from the last
        pair of columns back to the first, left candidates without an
        adjacent right candidate are dropped, leaving only key fields that
        start a full chain of adjacent matches.

        Args:
            column_values: Expected values of consecutive columns, wildcards allowed

        Returns:
            The first (key) field of the matching row. When several rows
            match, the first in traversal order.

        Raises:
            ValueError: If no column values are given
            NoMatchException: If the key column has no candidates or no row
                matches all columns
            AmbiguousMatchException: If several rows match in strict mode
        """
        if not column_values:
            raise ValueError("At least one column value is required to locate a row")

        formatted = format_values(list(column_values))
        logger.info("locating_row", columns=formatted)

        settings = get_settings()
        fields = self.find_text_fields()
        if settings.row_search_table_fields_only:
            # keep traversal order, ambiguous rows resolve to the first one
            fields = [field for field in fields if self._classifier.is_table_cell(field, fields)]
        values = {id(field): TextFieldOperator(field).get_value() for field in fields}

        column_matches: list[list[IComponent]] = []
        for value in column_values:
            candidates = [field for field in fields if matches(values[id(field)], value)]
            column_matches.append(candidates)
            logger.debug("column_candidates", value=value, count=len(candidates))

        if not column_matches[0]:
            raise NoMatchException(f"No column found with value '{column_values[0]}'", criteria=formatted)

        # filter out all columns that don't have an adjacent column
        for i in range(len(column_matches) - 1, 0, -1):
            right_columns = column_matches[i]
            column_matches[i - 1] = [
                col for col in column_matches[i - 1] if RowGeometry.has_adjacent(col, right_columns)
            ]

        key_columns = column_matches[0]
        if not key_columns:
            raise NoMatchException(f"No matching row found for {formatted}", criteria=formatted)

        if len(key_columns) > 1:
            if settings.strict_row_match:
                raise AmbiguousMatchException(formatted, len(key_columns))
            logger.warning("multiple_rows_matched", columns=formatted, count=len(key_columns))

        first_field = key_columns[0]
        logger.info("row_located", columns=formatted, x=first_field.x, y=first_field.y)
        return first_field

    def select_row(self, column_values: Sequence[str]) -> None:
        """Select a row by simulating a mouse click in its first field."""
        simulate_mouse_click(self.find_row(column_values))

    def find_row_checkboxes(self, key_field: IComponent) -> list[IComponent]:
        """Find all checkboxes on the same row as the key field, left to right."""
        boxes = self.find_components(ByRowChooser(key_field, None, ComponentType.CHECK_BOX))
        return sort_reading_order(boxes)

    def _get_checkbox_operator(self, index: int, column_values: Sequence[str]) -> CheckboxOperator:
        boxes = self.find_row_checkboxes(self.find_row(column_values))
        if index < 1 or len(boxes) < index:
            raise NoMatchException(
                f"Only found {len(boxes)} checkboxes next to the row, checkbox {index} requested",
                criteria=format_values(list(column_values)),
            )
        return CheckboxOperator(boxes[index - 1])

    def select_row_checkbox(self, index: int, column_values: Sequence[str]) -> None:
        """Check the n-th (1-based) checkbox of a row."""
        self._get_checkbox_operator(index, column_values).check()

    def deselect_row_checkbox(self, index: int, column_values: Sequence[str]) -> None:
        """Uncheck the n-th (1-based) checkbox of a row."""
        self._get_checkbox_operator(index, column_values).uncheck()

    def get_row_checkbox_state(self, index: int, column_values: Sequence[str]) -> bool:
        """Get the state of the n-th (1-based) checkbox of a row."""
        return self._get_checkbox_operator(index, column_values).is_checked()

    def _find_row_field(self, identifier: str, column_values: Sequence[str]) -> TextFieldOperator:
        first_column = self.find_row(column_values)
        results = self.find_components(ByRowChooser(first_column, identifier, ALL_TEXTFIELD_TYPES))
        if not results:
            raise NoMatchException(f"No row field found with name '{identifier}'", criteria=identifier)
        return TextFieldOperator(results[0])

    def set_row_field(self, identifier: str, value: str, column_values: Sequence[str]) -> None:
        """Set the value of a named field in the matching row."""
        self._find_row_field(identifier, column_values).set_value(value)

    def get_row_field(self, identifier: str, column_values: Sequence[str]) -> str:
        """Get the value of a named field in the matching row."""
        return self._find_row_field(identifier, column_values).get_value()
