"""Mock module for widgetmatch: in-memory widget tree adapters."""

from .mock_component import MockComponent, MockTreeItem

__all__ = [
    "MockComponent",
    "MockTreeItem",
]
