"""widgetmatch: component matching and table inference for GUI test automation.

Locates components in a live widget tree by name, type and accessible text,
and infers table rows and columns from geometry where the toolkit exposes
no table model.

Usage:
    from widgetmatch import ByNameChooser, TableOperator, find_components

    fields = find_components(window, ByNameChooser("Customer*"))
    TableOperator(window).select_row(["Alice", "42"])
"""

from .choosers import (
    ByClassChooser,
    ByComponentTypeChooser,
    ByNameChooser,
    ByRowChooser,
    ComponentChooser,
)
from .config import WidgetMatchSettings, get_settings
from .exceptions import (
    AdapterAccessError,
    AmbiguousMatchException,
    NoMatchException,
    WidgetMatchRuntimeException,
)
from .geometry import RowGeometry, TableFieldClassifier
from .hal.interfaces import IComponent, ITreeItem, MouseButton
from .model import ALL_TEXTFIELD_TYPES, Bounds, ComponentType
from .naming import NamingSession, assign_missing_names, get_component_names
from .operators import (
    CheckboxOperator,
    ContextOperator,
    TableOperator,
    TextFieldOperator,
    TreeOperator,
)
from .reporting import ComponentReporter
from .search import find_and_sort_components, find_components

__version__ = "0.1.0"

__all__ = [
    # Adapter interface
    "IComponent",
    "ITreeItem",
    "MouseButton",
    "Bounds",
    "ComponentType",
    "ALL_TEXTFIELD_TYPES",
    # Choosers and search
    "ComponentChooser",
    "ByComponentTypeChooser",
    "ByClassChooser",
    "ByNameChooser",
    "ByRowChooser",
    "find_components",
    "find_and_sort_components",
    # Inference
    "RowGeometry",
    "TableFieldClassifier",
    "NamingSession",
    "assign_missing_names",
    "get_component_names",
    # Operators
    "ContextOperator",
    "TableOperator",
    "TextFieldOperator",
    "CheckboxOperator",
    "TreeOperator",
    "ComponentReporter",
    # Configuration and errors
    "WidgetMatchSettings",
    "get_settings",
    "WidgetMatchRuntimeException",
    "NoMatchException",
    "AmbiguousMatchException",
    "AdapterAccessError",
]
