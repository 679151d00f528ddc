# Geometry module: segments, vertices and drawing-space area

from .segment import (
    Point,
    Segment,
    Measurements,
    next_segment_id,
    create_segment,
    update_segment_length,
    remove_segment,
)

from .vertices import (
    euclidean_distance,
    extract_vertices,
    is_closed_polygon,
    check_connectivity,
)

from .calculator import (
    polygon_area,
    polygon_perimeter,
    to_shapely_polygon,
    is_simple_polygon,
    validate_polygon,
)

__all__ = [
    # Segment
    "Point",
    "Segment",
    "Measurements",
    "next_segment_id",
    "create_segment",
    "update_segment_length",
    "remove_segment",
    # Vertices
    "euclidean_distance",
    "extract_vertices",
    "is_closed_polygon",
    "check_connectivity",
    # Calculator
    "polygon_area",
    "polygon_perimeter",
    "to_shapely_polygon",
    "is_simple_polygon",
    "validate_polygon",
]
