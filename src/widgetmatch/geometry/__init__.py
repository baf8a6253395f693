"""Geometry package: row alignment, adjacency and table cell detection.

Example usage:
    >>> from widgetmatch.geometry import RowGeometry, TableFieldClassifier
    >>>
    >>> RowGeometry.are_adjacent(name_field, age_field)
    >>> TableFieldClassifier().purge_table_fields(fields)
"""

from .ordering import reading_order_key, sort_reading_order
from .row_geometry import RowGeometry
from .table_fields import TableFieldClassifier

__all__ = [
    "RowGeometry",
    "TableFieldClassifier",
    "reading_order_key",
    "sort_reading_order",
]
