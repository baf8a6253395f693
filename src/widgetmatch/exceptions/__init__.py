"""Exceptions package.

Framework-specific exceptions.
"""

from .adapter_access_exception import AdapterAccessError
from .configuration_exception import ConfigurationError
from .field_exceptions import FieldNotEditableException, ValueMismatchException
from .no_match_exception import AmbiguousMatchException, NoMatchException
from .widgetmatch_runtime_exception import WidgetMatchRuntimeException

__all__ = [
    "WidgetMatchRuntimeException",
    "NoMatchException",
    "AmbiguousMatchException",
    "AdapterAccessError",
    "FieldNotEditableException",
    "ValueMismatchException",
    "ConfigurationError",
]
