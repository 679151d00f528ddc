"""
Geometry Calculator Module

Area and perimeter of the traced outline in drawing space, plus optional
shape validation.
"""

import logging
from typing import List, Optional, Sequence

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..constants import MIN_POLYGON_VERTICES
from .segment import Point
from .vertices import euclidean_distance

logger = logging.getLogger(__name__)


def polygon_area(vertices: Sequence[Point]) -> float:
    """
    Calculate polygon area with the shoelace (Gauss) formula.

    Vertex i is paired with vertex (i + 1) mod n, so a repeated closing
    vertex only adds a zero-length edge. The absolute value makes the
    result independent of winding order.

    Note: self-intersecting outlines give a number, but not a meaningful one.

    Args:
        vertices: Ordered polygon vertices in drawing space

    Returns:
        Area in drawing units squared (0.0 for fewer than 3 vertices)
    """
    n = len(vertices)
    if n < MIN_POLYGON_VERTICES:
        return 0.0

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += vertices[i].x * vertices[j].y
        total -= vertices[j].x * vertices[i].y

    return abs(total) / 2


def polygon_perimeter(vertices: Sequence[Point]) -> float:
    """
    Calculate the closed perimeter in drawing units.

    Args:
        vertices: Ordered polygon vertices

    Returns:
        Sum of edge lengths including the wraparound edge
    """
    n = len(vertices)
    if n < 2:
        return 0.0

    return sum(
        euclidean_distance(vertices[i], vertices[(i + 1) % n])
        for i in range(n)
    )


def _distinct_ring(vertices: Sequence[Point]) -> List[Point]:
    """Drop consecutive duplicates and the closing repeat."""
    ring: List[Point] = []
    for v in vertices:
        if not ring or ring[-1] != v:
            ring.append(v)

    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()

    return ring


def to_shapely_polygon(vertices: Sequence[Point]) -> Optional[Polygon]:
    """
    Build a Shapely Polygon from the vertex sequence.

    Args:
        vertices: Ordered polygon vertices (closing repeat allowed)

    Returns:
        Polygon, or None with fewer than 3 distinct vertices
    """
    ring = _distinct_ring(vertices)
    if len(ring) < MIN_POLYGON_VERTICES:
        return None

    return Polygon([(v.x, v.y) for v in ring])


def is_simple_polygon(vertices: Sequence[Point]) -> bool:
    """
    Check that the outline does not cross itself.

    Args:
        vertices: Ordered polygon vertices

    Returns:
        True if Shapely considers the polygon valid
    """
    polygon = to_shapely_polygon(vertices)
    if polygon is None:
        return False

    return polygon.is_valid


def validate_polygon(vertices: Sequence[Point]) -> List[str]:
    """
    Validate a traced outline and return warnings.

    Never changes the computed area; callers decide what to do with the
    warnings.

    Args:
        vertices: Ordered polygon vertices

    Returns:
        List of warning messages
    """
    warnings = []

    polygon = to_shapely_polygon(vertices)
    if polygon is None:
        warnings.append(
            f"Outline has fewer than {MIN_POLYGON_VERTICES} distinct vertices"
        )
        return warnings

    if not polygon.is_valid:
        warnings.append(f"Outline is not a simple polygon: {explain_validity(polygon)}")

    if polygon_area(vertices) == 0:
        warnings.append("Outline encloses zero area")

    return warnings
