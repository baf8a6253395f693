"""Reporting of widget trees for script authors."""

from .component_report import EDITABLE_MARKER, ComponentReporter

__all__ = [
    "ComponentReporter",
    "EDITABLE_MARKER",
]
