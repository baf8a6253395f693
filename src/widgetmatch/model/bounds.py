"""Bounds - rectangular area of a component in window coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Bounding box of a component.

    All coordinates are window-relative, so boxes of components living in
    different containers can be compared directly.
    """

    x: int = 0
    """X coordinate of top-left corner."""

    y: int = 0
    """Y coordinate of top-left corner."""

    width: int = 0
    """Width of the box."""

    height: int = 0
    """Height of the box."""

    @property
    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @classmethod
    def from_xywh(cls, x: int, y: int, w: int, h: int) -> Bounds:
        """Create Bounds from x, y, width, height."""
        return cls(x=x, y=y, width=w, height=h)

    def format_location(self, width: int = 8) -> str:
        """Format the origin as ``"x,y"`` left-aligned in a fixed-width column.

        Args:
            width: Minimum column width

        Returns:
            Padded location string
        """
        return f"{self.x},{self.y}".ljust(width)

    def __str__(self) -> str:
        return f"Bounds(x={self.x}, y={self.y}, w={self.width}, h={self.height})"
