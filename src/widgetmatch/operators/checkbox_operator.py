"""Operator for checkboxes."""

from ..exceptions import ValueMismatchException
from ..hal.interfaces.widget_tree import CHECKED, IComponent
from ..naming.display_names import get_formatted_component_names
from .component_actions import simulate_mouse_click


class CheckboxOperator:
    """Check, uncheck and query one checkbox.

    State changes are made by clicking, so the application sees the same
    events as for a user interaction.
    """

    def __init__(self, component: IComponent) -> None:
        self._component = component

    def get_source(self) -> IComponent:
        return self._component

    def is_checked(self) -> bool:
        return bool(self._component.optional_bool(CHECKED))

    def check(self) -> None:
        if not self.is_checked():
            simulate_mouse_click(self._component)

    def uncheck(self) -> None:
        if self.is_checked():
            simulate_mouse_click(self._component)

    def verify_checked(self, expected: bool) -> None:
        """Verify the checkbox state.

        Raises:
            ValueMismatchException: If the state differs
        """
        actual = self.is_checked()
        if actual != expected:
            raise ValueMismatchException(get_formatted_component_names(self._component), expected, actual)
