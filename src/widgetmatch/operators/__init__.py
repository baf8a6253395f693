"""Operators: lookups and interactions on top of tree search.

- ContextOperator: searches within a context container
- TableOperator: row resolution and row-scoped field access
- TextFieldOperator: text field values
- CheckboxOperator: checkbox state
- TreeOperator: tree path selection
"""

from .checkbox_operator import CheckboxOperator
from .component_actions import simulate_key_pressed, simulate_mouse_click
from .context_operator import ContextOperator
from .table_operator import TableOperator
from .text_field_operator import TextFieldOperator
from .tree_operator import TreeOperator

__all__ = [
    "ContextOperator",
    "TableOperator",
    "TextFieldOperator",
    "CheckboxOperator",
    "TreeOperator",
    "simulate_mouse_click",
    "simulate_key_pressed",
]
