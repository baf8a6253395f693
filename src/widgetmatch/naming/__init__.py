"""Component naming: display name sets and synthetic names."""

from .auto_naming import NamingSession, assign_missing_names
from .display_names import (
    get_accessible_text,
    get_component_names,
    get_formatted_component_names,
    has_name,
    is_editable,
    is_generated_name,
)

__all__ = [
    "NamingSession",
    "assign_missing_names",
    "get_accessible_text",
    "get_component_names",
    "get_formatted_component_names",
    "has_name",
    "is_editable",
    "is_generated_name",
]
