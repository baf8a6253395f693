"""Row geometry for components.

Tables in the supported toolkits expose no structural metadata. Rows and
columns are inferred from the bounding boxes of the cell components:
components on the same row share a narrow vertical band, neighbouring
columns of one row sit immediately next to each other.
"""

import logging

from ..config import get_settings
from ..hal.interfaces.widget_tree import IComponent

logger = logging.getLogger(__name__)


class RowGeometry:
    """Pairwise geometric predicates used for row inference.

    Tolerances default to the configured settings and can be overridden per
    call.
    """

    @staticmethod
    def are_aligned_vertically(
        comp1: IComponent, comp2: IComponent, tolerance: int | None = None
    ) -> bool:
        """Check if two components are on the same vertical level.

        Symmetric and reflexive, but not transitive.

        Args:
            comp1: First component
            comp2: Second component
            tolerance: Exclusive bound on the y difference

        Returns:
            True if ``|comp1.y - comp2.y| < tolerance``
        """
        if tolerance is None:
            tolerance = get_settings().alignment_tolerance
        return abs(comp1.y - comp2.y) < tolerance

    @staticmethod
    def horizontal_gap(comp1: IComponent, comp2: IComponent) -> int:
        """Distance from the right edge of comp1 to the left edge of comp2."""
        bounds = comp1.get_bounds()
        return comp2.x - bounds.right

    @staticmethod
    def are_adjacent(
        comp1: IComponent,
        comp2: IComponent,
        min_gap: int | None = None,
        max_gap: int | None = None,
        tolerance: int | None = None,
    ) -> bool:
        """Check if comp2 is located immediately to the right of comp1.

        Not symmetric: the test is directional, and a component is never
        adjacent to itself.

        Args:
            comp1: Left component
            comp2: Candidate right neighbour
            min_gap: Exclusive lower bound of the gap (slight overlap allowed)
            max_gap: Exclusive upper bound of the gap
            tolerance: Vertical alignment tolerance

        Returns:
            True if both are aligned and ``min_gap < gap < max_gap``
        """
        settings = get_settings()
        if min_gap is None:
            min_gap = settings.adjacency_min_gap
        if max_gap is None:
            max_gap = settings.adjacency_max_gap

        if comp1 is comp2:
            return False

        if RowGeometry.are_aligned_vertically(comp1, comp2, tolerance):
            delta_x = RowGeometry.horizontal_gap(comp1, comp2)
            if min_gap < delta_x < max_gap:
                logger.debug(
                    f"Found adjacent field {comp1.x}-{comp1.x + comp1.width},{comp1.y} / {comp2.x},{comp2.y}"
                )
                return True

        logger.debug(f"No match {comp1.x}-{comp1.x + comp1.width},{comp1.y} / {comp2.x},{comp2.y}")
        return False

    @staticmethod
    def has_adjacent(component: IComponent, candidates: list[IComponent]) -> bool:
        """Check if any candidate is adjacent to the right of the component."""
        return any(RowGeometry.are_adjacent(component, candidate) for candidate in candidates)
