"""Adapter access exception.

Raised by widget tree adapters when a live property cannot be read.
"""

from .widgetmatch_runtime_exception import WidgetMatchRuntimeException


class AdapterAccessError(WidgetMatchRuntimeException):
    """A widget adapter failed to read a property from a live component.

    Adapter implementations raise this from ``read_property``. The typed
    optional getters on ``IComponent`` catch it and report the property as
    absent, since many components legitimately lack optional properties.
    """

    def __init__(self, property_name: str, cause: Exception | None = None):
        """Construct a new adapter access error.

        Args:
            property_name: Name of the property that could not be read
            cause: Underlying toolkit error, if any
        """
        self.property_name = property_name
        super().__init__(f"Unable to read property '{property_name}'", cause)
