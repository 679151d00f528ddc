"""
Vertex Extraction Module

Turns an ordered chain of segments into a closed vertex sequence.
"""

import logging
from typing import List, Sequence

from ..constants import (
    CLOSURE_TOLERANCE_PX,
    CONNECTIVITY_TOLERANCE_PX,
    MIN_POLYGON_SEGMENTS,
    MIN_POLYGON_VERTICES,
)
from .segment import Point, Segment, euclidean_distance

logger = logging.getLogger(__name__)


def extract_vertices(segments: Sequence[Segment]) -> List[Point]:
    """
    Extract polygon vertices from segments connected end-to-end.

    The first segment's start point is followed by every segment's end
    point. With 3 or more segments the loop is closed by repeating the
    first vertex, unless the last vertex already equals it exactly.
    Connectivity is not checked; see check_connectivity.

    Args:
        segments: Segments in drawing order

    Returns:
        Ordered list of vertices
    """
    if not segments:
        return []

    vertices = [segments[0].start]
    vertices.extend(s.end for s in segments)

    if len(segments) >= MIN_POLYGON_SEGMENTS:
        first = vertices[0]
        last = vertices[-1]
        if first.x != last.x or first.y != last.y:
            vertices.append(first)

    return vertices


def is_closed_polygon(
    points: Sequence[Point],
    tolerance: float = CLOSURE_TOLERANCE_PX
) -> bool:
    """
    Check whether a point sequence ends near where it started.

    Args:
        points: Ordered points
        tolerance: Max first/last distance (drawing units)

    Returns:
        True if there are at least 3 points and the ends are within tolerance
    """
    if len(points) < MIN_POLYGON_VERTICES:
        return False

    return euclidean_distance(points[0], points[-1]) < tolerance


def check_connectivity(
    segments: Sequence[Segment],
    tolerance: float = CONNECTIVITY_TOLERANCE_PX
) -> List[str]:
    """
    Check that each segment starts where the previous one ended.

    Args:
        segments: Segments in drawing order
        tolerance: Max allowed gap (drawing units)

    Returns:
        List of warning messages (empty if the chain is connected and closed)
    """
    warnings = []

    for prev, curr in zip(segments, segments[1:]):
        gap = euclidean_distance(prev.end, curr.start)
        if gap >= tolerance:
            warnings.append(
                f"Segment {curr.id} starts {gap:.1f} units away from "
                f"the end of segment {prev.id}"
            )

    if len(segments) >= MIN_POLYGON_SEGMENTS:
        gap = euclidean_distance(segments[-1].end, segments[0].start)
        if gap >= tolerance:
            warnings.append(
                f"Outline is not closed: last segment {segments[-1].id} ends "
                f"{gap:.1f} units from the start of segment {segments[0].id}"
            )

    return warnings
