"""Utility helpers."""

from .text_util import (
    LEVEL_SEPARATOR,
    format_values,
    get_first_segment,
    get_next_segments,
    matches,
    matches_label,
    remove_newline,
)

__all__ = [
    "LEVEL_SEPARATOR",
    "format_values",
    "get_first_segment",
    "get_next_segments",
    "matches",
    "matches_label",
    "remove_newline",
]
