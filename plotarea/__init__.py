# Plot Area: real-world area of a traced land plot

from .geometry import (
    Point,
    Segment,
    Measurements,
    extract_vertices,
    polygon_area,
)

from .calibration import (
    AreaEstimate,
    scale_to_real_world,
    estimate_real_world_area,
)

from .pipeline import measure_segments

__all__ = [
    "Point",
    "Segment",
    "Measurements",
    "extract_vertices",
    "polygon_area",
    "AreaEstimate",
    "scale_to_real_world",
    "estimate_real_world_area",
    "measure_segments",
]
