"""Widgetmatch runtime exception.

Base exception for the framework.
"""


class WidgetMatchRuntimeException(RuntimeError):
    """Base runtime exception for all widgetmatch exceptions.

    Lookup failures propagate through the operators up to the caller (the
    keyword layer that drives the test script), so every framework error is a
    runtime exception that intermediate code does not need to handle.
    """

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        """Construct a new runtime exception.

        Args:
            message: The detail message
            cause: The cause of the exception
        """
        if message and cause:
            super().__init__(f"{message}: {cause}")
            self.__cause__ = cause
        elif message:
            super().__init__(message)
        elif cause:
            super().__init__(str(cause))
            self.__cause__ = cause
        else:
            super().__init__()
