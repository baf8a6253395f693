"""Component type tags understood by the matching engine.

Adapters report a (possibly namespace-qualified) type tag per component;
the engine compares the unqualified base name against these values.
"""

import re
from enum import Enum


class ComponentType(str, Enum):
    """Base type names of the widget kinds the engine reasons about."""

    PUSH_BUTTON = "Button"
    MENU = "Menu"
    EXTENDED_CHECKBOX = "ExtendedCheckbox"
    CHECK_BOX = "CheckBox"
    TEXT_FIELD = "TextField"
    TEXT_AREA = "TextArea"
    TREE = "Tree"
    LABEL = "Label"
    PANEL = "Panel"
    WINDOW = "Window"


# Types whose visible label is their primary display name
LABELED_TYPES: frozenset[str] = frozenset(
    {ComponentType.PUSH_BUTTON.value, ComponentType.MENU.value, ComponentType.EXTENDED_CHECKBOX.value}
)

# Text entry types; these carry a value and an editable flag
ALL_TEXTFIELD_TYPES: frozenset[str] = frozenset(
    {ComponentType.TEXT_FIELD.value, ComponentType.TEXT_AREA.value}
)

_QUALIFIER_SEPARATORS = re.compile(r"[.:/$]")


def base_type_name(type_tag: str) -> str:
    """Strip any namespace or qualification from a type tag.

    Example:
        >>> base_type_name("oracle.forms.ui.VTextField")
        'VTextField'
        >>> base_type_name("Button")
        'Button'
    """
    return _QUALIFIER_SEPARATORS.split(type_tag)[-1]


def type_names(*types: "ComponentType | str | frozenset[str]") -> frozenset[str]:
    """Flatten component types, raw names and type groups into a set of base names."""
    names: set[str] = set()
    for entry in types:
        if isinstance(entry, ComponentType):
            names.add(entry.value)
        elif isinstance(entry, str):
            names.add(entry)
        else:
            names.update(str(name) for name in entry)
    return frozenset(names)
