"""
Real-World Scaler Module

Converts a drawing-space area into square meters using the real-world
lengths the user declared on each segment.

Two strategies are used:
    RECTANGLE - exactly four segments whose opposite declared lengths match
                within tolerance; area is side A * side B and the drawn
                pixel geometry is ignored.
    RATIO     - every other case; the per-segment meters-per-pixel ratios
                are averaged and the pixel area is scaled by the square of
                that average.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Dict, Any

import numpy as np

from ..constants import (
    AreaMethod,
    MIN_POLYGON_SEGMENTS,
    RECTANGLE_SEGMENT_COUNT,
    RECTANGLE_TOLERANCE_M,
)
from ..geometry.segment import Segment
from ..geometry.vertices import euclidean_distance

logger = logging.getLogger(__name__)


@dataclass
class AreaEstimate:
    """Real-world area together with how it was derived."""
    area_sqm: float
    method: str = AreaMethod.NONE
    ratio: float = 0.0  # mean meters per drawing unit (RATIO only)
    ratio_samples: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "area_sqm": round(self.area_sqm, 4),
            "method": self.method,
            "ratio": self.ratio,
            "ratio_samples": self.ratio_samples,
        }


def is_rectangle(
    segments: Sequence[Segment],
    tolerance: float = RECTANGLE_TOLERANCE_M
) -> bool:
    """
    Check whether four segments have matching opposite declared lengths.

    Only declared lengths are compared (A vs C, B vs D); angles are not
    checked, so any quadrilateral with matching opposite sides passes.

    Args:
        segments: Segments in drawing order
        tolerance: Absolute tolerance in meters

    Returns:
        True if the rectangle shortcut applies
    """
    if len(segments) != RECTANGLE_SEGMENT_COUNT:
        return False

    a, b, c, d = (s.length for s in segments)
    return abs(a - c) < tolerance and abs(b - d) < tolerance


def pixel_to_meter_ratios(segments: Sequence[Segment]) -> List[float]:
    """
    Meters per drawing unit for each segment with non-zero pixel length.

    Zero-length segments are skipped.
    """
    ratios = []
    for segment in segments:
        pixel_length = euclidean_distance(segment.start, segment.end)
        if pixel_length > 0:
            ratios.append(segment.length / pixel_length)
        else:
            logger.debug(f"Segment {segment.id} has zero pixel length, skipping")
    return ratios


def average_ratio(segments: Sequence[Segment]) -> float:
    """Mean meters-per-drawing-unit ratio (0.0 if none can be computed)."""
    ratios = pixel_to_meter_ratios(segments)
    if not ratios:
        return 0.0
    return float(np.mean(ratios))


def select_area_method(
    segments: Sequence[Segment],
    tolerance: float = RECTANGLE_TOLERANCE_M
) -> str:
    """
    Pick the area strategy from the declared segment lengths alone.

    Returns:
        AreaMethod.NONE for fewer than 3 segments, RECTANGLE when the
        shortcut applies, otherwise RATIO
    """
    if len(segments) < MIN_POLYGON_SEGMENTS:
        return AreaMethod.NONE
    if is_rectangle(segments, tolerance):
        return AreaMethod.RECTANGLE
    return AreaMethod.RATIO


def estimate_real_world_area(
    pixel_area: float,
    segments: Sequence[Segment],
    scale: float = 1,
    tolerance: float = RECTANGLE_TOLERANCE_M
) -> AreaEstimate:
    """
    Estimate the real-world area and report which strategy produced it.

    Args:
        pixel_area: Polygon area in drawing units squared
        segments: Segments in drawing order, with declared lengths in meters
        scale: Display ratio (1:scale); recorded only, not part of the formula
        tolerance: Rectangle shortcut tolerance in meters

    Returns:
        AreaEstimate in square meters
    """
    method = select_area_method(segments, tolerance)
    logger.debug(f"Area method {method} for {len(segments)} segments (display scale 1:{scale})")

    if method == AreaMethod.NONE:
        return AreaEstimate(area_sqm=0.0)

    if method == AreaMethod.RECTANGLE:
        side_a = segments[0].length
        side_b = segments[1].length
        return AreaEstimate(area_sqm=side_a * side_b, method=AreaMethod.RECTANGLE)

    ratios = pixel_to_meter_ratios(segments)
    if not ratios:
        logger.warning("No segment has a non-zero pixel length, cannot scale area")
        return AreaEstimate(area_sqm=0.0)

    mean_ratio = float(np.mean(ratios))

    # Area scales with the square of the linear ratio
    area_sqm = pixel_area * mean_ratio * mean_ratio

    logger.debug(
        f"Mean ratio {mean_ratio:.6f} m/unit over {len(ratios)} segments: "
        f"{pixel_area:.1f} units² -> {area_sqm:.2f} m²"
    )

    return AreaEstimate(
        area_sqm=area_sqm,
        method=AreaMethod.RATIO,
        ratio=mean_ratio,
        ratio_samples=len(ratios),
    )


def scale_to_real_world(
    pixel_area: float,
    segments: Sequence[Segment],
    scale: float = 1,
    tolerance: float = RECTANGLE_TOLERANCE_M
) -> float:
    """
    Convert a drawing-space area into square meters.

    Args:
        pixel_area: Polygon area in drawing units squared
        segments: Segments in drawing order, with declared lengths in meters
        scale: Display ratio (1:scale); accepted but not used by the formula
        tolerance: Rectangle shortcut tolerance in meters

    Returns:
        Area in square meters (0.0 when no closed shape can be scaled)
    """
    return estimate_real_world_area(pixel_area, segments, scale, tolerance).area_sqm
