"""Text helpers for name and value matching."""

import re
from functools import lru_cache

WILDCARD = "*"
LEVEL_SEPARATOR = ">"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    parts = (re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(".*".join(parts), re.DOTALL)


def matches(text: str | None, pattern: str | None) -> bool:
    """Check if a component text matches a user supplied pattern.

    ``*`` in the pattern matches any sequence of characters, everything else
    must match exactly (case-sensitive).

    Args:
        text: Text read from the component
        pattern: Expected value, possibly containing wildcards

    Returns:
        True if the text matches
    """
    if text is None or pattern is None:
        return False
    return _compile(pattern).fullmatch(text) is not None


def matches_label(label: str | None, pattern: str | None) -> bool:
    """Check if a field label matches a pattern, ignoring a trailing colon.

    Labels such as ``City:`` are addressed as ``City`` in test scripts.
    Values are never compared this way, use ``matches`` for them.
    """
    if matches(label, pattern):
        return True
    if label is None:
        return False

    stripped = label.rstrip()
    if stripped.endswith(":"):
        return matches(stripped[:-1].rstrip(), pattern)
    return False


def remove_newline(text: str) -> str:
    """Replace line breaks with single spaces."""
    return re.sub(r"\s*[\r\n]+\s*", " ", text).strip()


def format_values(values: list[str] | tuple[str, ...]) -> str:
    """Format a list of values for log and error messages: ``[a | b | c]``."""
    return "[" + " | ".join(values) + "]"


def get_first_segment(path: str, separator: str = LEVEL_SEPARATOR) -> str:
    """Get the first segment of a separated path, trimmed."""
    return path.split(separator, 1)[0].strip()


def get_next_segments(path: str, separator: str = LEVEL_SEPARATOR) -> str:
    """Get everything after the first segment of a separated path."""
    parts = path.split(separator, 1)
    return parts[1].strip() if len(parts) > 1 else ""
