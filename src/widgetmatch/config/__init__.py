"""Configuration package.

Usage:
    from widgetmatch.config import get_settings

    settings = get_settings()
    tolerance = settings.alignment_tolerance
"""

from .settings import WidgetMatchSettings, configure, get_settings, reset_settings

__all__ = [
    "WidgetMatchSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
