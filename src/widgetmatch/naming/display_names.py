"""Display names of components.

A component can be addressed by several human-readable names. They are
collected, in priority order, into a display name set:

1. the visible label, for button-like types
2. the accessible description, unless it looks auto-generated
3. the tooltip
4. when none of the above exist: an empty string and the assigned name

The empty string lets test scripts address unnamed components with a blank
identifier.
"""

import re

from ..hal.interfaces.widget_tree import ACCESSIBLE_DESCRIPTION, EDITABLE, LABEL, TOOLTIP, IComponent
from ..model.component_type import ALL_TEXTFIELD_TYPES, LABELED_TYPES
from ..util.text_util import matches_label, remove_newline

GENERATED_NAME_PATTERN = re.compile(r"[A-Z_]*[0-9]*")

EMPTY_NAME = "${EMPTY}"


def get_accessible_text(component: IComponent) -> str | None:
    """Get the accessible description with line breaks flattened."""
    description = component.optional_string(ACCESSIBLE_DESCRIPTION)
    if description is None:
        return None
    return remove_newline(description)


def get_tooltip_text(component: IComponent) -> str | None:
    """Get the tooltip, treating blank tooltips as absent."""
    tooltip = component.optional_string(TOOLTIP)
    if tooltip is None or not tooltip.strip():
        return None
    return tooltip


def is_generated_name(text: str) -> bool:
    """Check if a text looks like a toolkit generated identifier (e.g. ``TXT_12``)."""
    return GENERATED_NAME_PATTERN.fullmatch(text) is not None


def get_component_names(component: IComponent) -> list[str]:
    """Build the display name set of a component.

    Args:
        component: Component to describe

    Returns:
        Ordered, deduplicated list of names; never empty
    """
    names: list[str] = []

    if component.base_type in LABELED_TYPES:
        label = component.optional_string(LABEL)
        if label is not None:
            names.append(label)

    accessible_text = get_accessible_text(component)
    if accessible_text is not None and accessible_text not in names and not is_generated_name(accessible_text):
        names.append(accessible_text)

    tooltip = get_tooltip_text(component)
    if tooltip is not None and tooltip not in names:
        names.append(tooltip)

    if not names:
        names.append("")
        default_name = component.get_name()
        if default_name is not None and default_name not in names:
            names.append(default_name)

    return names


def get_formatted_component_names(component: IComponent) -> str:
    """Format the display name set as ``primary (alternate) (alternate)``."""
    names = get_component_names(component)
    primary = names[0] or EMPTY_NAME
    return primary + "".join(f" ({name})" for name in names[1:])


def has_name(component: IComponent, name: str | None) -> bool:
    """Check if one of the component's display names matches the given pattern.

    A trailing colon on a name is ignored, so ``City`` finds a field labelled
    ``City:``.
    """
    if name is None:
        return False
    return any(matches_label(component_name, name) for component_name in get_component_names(component))


def is_editable(component: IComponent) -> bool:
    """Check if the component is an editable text entry field."""
    if component.base_type not in ALL_TEXTFIELD_TYPES:
        return False
    return bool(component.optional_bool(EDITABLE))
