"""No match exception.

Exception for required lookups that found nothing.
"""

from .widgetmatch_runtime_exception import WidgetMatchRuntimeException


class NoMatchException(WidgetMatchRuntimeException):
    """Thrown when a required lookup (row, field, checkbox, tree item) finds no result.

    The message always names the search criteria so a failing test script
    shows what was being looked for.
    """

    def __init__(self, message: str, criteria: str | None = None):
        """Construct a new no match exception.

        Args:
            message: Description of the failed lookup
            criteria: Optional search criteria, kept for programmatic access
        """
        self.criteria = criteria
        super().__init__(message)


class AmbiguousMatchException(WidgetMatchRuntimeException):
    """Thrown when several candidates match where exactly one was expected.

    Only raised when strict matching is enabled in the settings. The default
    policy logs a warning and keeps the first candidate in traversal order.
    """

    def __init__(self, criteria: str, count: int):
        self.criteria = criteria
        self.count = count
        super().__init__(f"Found {count} matches for {criteria}, expected exactly one")
