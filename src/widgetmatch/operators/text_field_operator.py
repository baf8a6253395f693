"""Operator for text entry fields."""

from __future__ import annotations

from ..choosers import ByNameChooser
from ..config import get_settings
from ..exceptions import FieldNotEditableException, NoMatchException, ValueMismatchException
from ..hal.interfaces.widget_tree import TEXT, IComponent
from ..logging import get_logger
from ..model.component_type import ALL_TEXTFIELD_TYPES
from ..naming.display_names import get_formatted_component_names, is_editable
from ..util.text_util import matches
from .component_actions import simulate_key_pressed, simulate_mouse_click
from .context_operator import ContextOperator

logger = get_logger(__name__)


class TextFieldOperator:
    """Read, write and verify the value of one text field.

    Example:
        >>> field = TextFieldOperator.find(context, "Username")
        >>> field.set_value("jeff")
        >>> field.verify_value("j*")
    """

    def __init__(self, component: IComponent) -> None:
        self._component = component

    @classmethod
    def find(cls, context: ContextOperator, identifier: str) -> TextFieldOperator:
        """Locate a standalone text field by display name.

        Args:
            context: Context to search in
            identifier: Display name pattern

        Returns:
            Operator for the first matching field

        Raises:
            NoMatchException: If no standalone field has that name
        """
        component = context.find_text_field(ByNameChooser(identifier, ALL_TEXTFIELD_TYPES))
        if component is None:
            raise NoMatchException(f"No text field found with name '{identifier}'", criteria=identifier)
        return cls(component)

    def get_source(self) -> IComponent:
        return self._component

    def get_value(self) -> str:
        """Get the current text; an absent value reads as an empty string."""
        return self._component.optional_string(TEXT) or ""

    def set_value(self, value: str) -> None:
        """Focus the field, replace its text and commit with the configured key.

        Raises:
            FieldNotEditableException: If the field is read-only
        """
        if not is_editable(self._component):
            raise FieldNotEditableException(get_formatted_component_names(self._component))

        simulate_mouse_click(self._component)
        self._component.set_text(value)

        commit_key = get_settings().commit_key
        if commit_key:
            simulate_key_pressed(self._component, commit_key)

        logger.debug(
            "field_value_set",
            field=get_formatted_component_names(self._component),
            value=value,
        )

    def verify_value(self, expected: str) -> None:
        """Verify the field content against a wildcard pattern.

        Raises:
            ValueMismatchException: If the content does not match
        """
        actual = self.get_value()
        if not matches(actual, expected):
            raise ValueMismatchException(get_formatted_component_names(self._component), expected, actual)
