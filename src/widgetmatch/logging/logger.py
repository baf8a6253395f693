"""Structured logging configuration for widgetmatch using structlog.

Operators log structured events (``row_located``, ``component_listed``...)
through structlog, rendered by the standard library handlers configured here.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

DISABLE_CONSOLE_ENV = "WIDGETMATCH_DISABLE_CONSOLE_LOGGING"

# Global state for lazy initialization
_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = False,
    colorize: bool = True,
) -> None:
    """Configure structured logging for widgetmatch.

    An explicit call replaces the lazy setup done on the first log call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output (overridden by WIDGETMATCH_DISABLE_CONSOLE_LOGGING)
        add_timestamp: Add timestamps to logs
        add_caller_info: Add caller information
        colorize: Colorize console output (only for non-structured)
    """
    if os.getenv(DISABLE_CONSOLE_ENV) == "1":
        console = False
        log_file = None

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )

    global _logging_initialized
    _logging_initialized = True


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    if os.getenv(DISABLE_CONSOLE_ENV) == "1":
        logging.disable(logging.CRITICAL)
        _logging_initialized = True
        return

    settings = get_settings()
    setup_logging(
        level="DEBUG" if settings.debug_mode else settings.log_level,
        log_file=settings.log_file,
        structured=not settings.debug_mode,
        colorize=settings.debug_mode,
    )

    _logging_initialized = True


class _DeferredLogger:
    """Logger handle that configures logging on its first use.

    Modules create their loggers at import time; handlers are only
    installed once something is actually logged, so importing widgetmatch
    leaves the host application's logging untouched.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._logger: Any = None

    def __getattr__(self, attr: str) -> Any:
        if self._logger is None:
            _ensure_logging_initialized()
            self._logger = structlog.get_logger(self._name)
        return getattr(self._logger, attr)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Logging is initialized lazily on the first log call, not here.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return cast(structlog.stdlib.BoundLogger, _DeferredLogger(name))
