"""
Segment Data Structure Module

Defines the Point, Segment and Measurements value types and their
interop (JSON) field shapes.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Dict, Any

from ..constants import DEFAULT_SEGMENT_LENGTH_M

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A point in drawing space (typically screen pixels)."""
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """
        Build a Point from {"x": ..., "y": ...}.

        Raises:
            ValueError: If a coordinate is missing, not a number or not finite
        """
        if not isinstance(data, dict):
            raise ValueError(f"Point must be an object, got {type(data).__name__}")

        coords = []
        for key in ("x", "y"):
            if key not in data:
                raise ValueError(f"Point is missing '{key}'")
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Point '{key}' must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Point '{key}' must be finite, got {value!r}")
            coords.append(float(value))

        return cls(coords[0], coords[1])


def euclidean_distance(p: Point, q: Point) -> float:
    """Straight-line distance between two points in drawing space."""
    dx = q.x - p.x
    dy = q.y - p.y
    return math.sqrt(dx * dx + dy * dy)


@dataclass(frozen=True)
class Segment:
    """
    A drawn segment with its user-declared real-world length.

    The id is assigned by the caller; uniqueness is not checked here.
    """
    id: int
    start: Point
    end: Point
    length: float  # meters

    @property
    def pixel_length(self) -> float:
        """Drawing-space length of the segment."""
        return euclidean_distance(self.start, self.end)

    def to_dict(self) -> Dict[str, Any]:
        """Convert segment to the interop dictionary shape."""
        return {
            "id": self.id,
            "startPoint": self.start.to_dict(),
            "endPoint": self.end.to_dict(),
            "length": self.length,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        default_length: Optional[float] = None
    ) -> "Segment":
        """
        Build a Segment from {id, startPoint, endPoint, length}.

        A missing length falls back to default_length when one is given.

        Raises:
            ValueError: If a field is missing or invalid (non-integral id,
                non-positive or non-finite length)
        """
        if not isinstance(data, dict):
            raise ValueError(f"Segment must be an object, got {type(data).__name__}")

        for key in ("id", "startPoint", "endPoint"):
            if key not in data:
                raise ValueError(f"Segment is missing '{key}'")

        if "length" not in data and default_length is None:
            raise ValueError("Segment is missing 'length'")

        seg_id = data["id"]
        if isinstance(seg_id, bool) or not isinstance(seg_id, (int, float)):
            raise ValueError(f"Segment 'id' must be a number, got {seg_id!r}")
        if isinstance(seg_id, float) and not seg_id.is_integer():
            raise ValueError(f"Segment 'id' must be a whole number, got {seg_id!r}")

        length = data.get("length", default_length)
        if isinstance(length, bool) or not isinstance(length, (int, float)):
            raise ValueError(f"Segment 'length' must be a number, got {length!r}")
        if not math.isfinite(length) or length <= 0:
            raise ValueError(f"Segment 'length' must be positive, got {length!r}")

        return cls(
            id=int(seg_id),
            start=Point.from_dict(data["startPoint"]),
            end=Point.from_dict(data["endPoint"]),
            length=float(length),
        )


@dataclass
class Measurements:
    """Persisted measurement bundle: the drawn segments and their area."""
    lines: List[Segment] = field(default_factory=list)
    area: float = 0.0
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "lines": [line.to_dict() for line in self.lines],
            "area": self.area,
        }
        if self.date is not None:
            data["date"] = self.date
        return data

    @classmethod
    def from_dict(
        cls,
        data: Any,
        default_length: Optional[float] = None
    ) -> "Measurements":
        """
        Build a bundle from {lines, area} or from a bare list of lines.

        Lines without a length get default_length, if given.

        Raises:
            ValueError: If the structure is not recognised
        """
        if isinstance(data, list):
            data = {"lines": data}

        if not isinstance(data, dict):
            raise ValueError(f"Measurements must be an object or list, got {type(data).__name__}")

        if "lines" not in data:
            raise ValueError("Measurements is missing 'lines'")
        if not isinstance(data["lines"], list):
            raise ValueError("Measurements 'lines' must be a list")

        area = data.get("area", 0.0)
        if isinstance(area, bool) or not isinstance(area, (int, float)):
            raise ValueError(f"Measurements 'area' must be a number, got {area!r}")

        lines = []
        for index, item in enumerate(data["lines"]):
            try:
                lines.append(Segment.from_dict(item, default_length))
            except ValueError as e:
                raise ValueError(f"Line {index}: {e}") from e

        return cls(lines=lines, area=float(area), date=data.get("date"))


def next_segment_id(segments: List[Segment]) -> int:
    """
    Pick an id for a newly drawn segment.

    Uses len + 1 like the drawing surface does, falling back to
    max(id) + 1 when that id is already taken (e.g. after a delete).
    """
    candidate = len(segments) + 1
    used = {s.id for s in segments}
    if candidate not in used:
        return candidate
    return max(used) + 1


def create_segment(
    start: Point,
    end: Point,
    segments: List[Segment],
    default_length: float = DEFAULT_SEGMENT_LENGTH_M
) -> Segment:
    """
    Create a new segment carrying the default real-world length.

    Args:
        start: Start point in drawing space
        end: End point in drawing space
        segments: Existing segments (used for id assignment)
        default_length: Real-world length in meters

    Returns:
        New Segment (not appended to segments)
    """
    return Segment(
        id=next_segment_id(segments),
        start=start,
        end=end,
        length=default_length,
    )


def update_segment_length(
    segments: List[Segment],
    segment_id: int,
    new_length: float
) -> List[Segment]:
    """
    Return a copy of segments with one segment's declared length replaced.

    Non-positive or NaN lengths are ignored and the segments are returned
    unchanged, as the measurement panel does for invalid edits.
    """
    if math.isnan(new_length) or new_length <= 0:
        logger.debug(f"Ignoring invalid length {new_length} for segment {segment_id}")
        return list(segments)

    return [
        replace(s, length=new_length) if s.id == segment_id else s
        for s in segments
    ]


def remove_segment(segments: List[Segment], segment_id: int) -> List[Segment]:
    """Return a copy of segments without the given id."""
    return [s for s in segments if s.id != segment_id]
