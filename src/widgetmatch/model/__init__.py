"""Model package: geometry values and component type tags."""

from .bounds import Bounds
from .component_type import (
    ALL_TEXTFIELD_TYPES,
    LABELED_TYPES,
    ComponentType,
    base_type_name,
    type_names,
)

__all__ = [
    "Bounds",
    "ComponentType",
    "ALL_TEXTFIELD_TYPES",
    "LABELED_TYPES",
    "base_type_name",
    "type_names",
]
