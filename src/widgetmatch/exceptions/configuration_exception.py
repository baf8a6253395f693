"""Configuration exception."""

from .widgetmatch_runtime_exception import WidgetMatchRuntimeException


class ConfigurationError(WidgetMatchRuntimeException):
    """Thrown when the settings contain an inconsistent combination of values."""

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        if setting:
            message = f"Invalid setting '{setting}': {message}"
        super().__init__(message)
