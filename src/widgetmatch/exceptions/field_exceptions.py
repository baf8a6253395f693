"""Field operation exceptions."""

from .widgetmatch_runtime_exception import WidgetMatchRuntimeException


class FieldNotEditableException(WidgetMatchRuntimeException):
    """Thrown when a value is written to a text field that is not editable."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' is not editable")


class ValueMismatchException(WidgetMatchRuntimeException):
    """Thrown when a verified component value differs from the expected one."""

    def __init__(self, field_name: str, expected: object, actual: object):
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Field '{field_name}' has value '{actual}', expected '{expected}'"
        )
