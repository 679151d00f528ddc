"""
JSON Writer Module

Reads and writes measurement bundles in the {lines, area} interop shape.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from ..constants import MIN_POLYGON_SEGMENTS
from ..geometry.segment import Measurements, Segment

logger = logging.getLogger(__name__)


def generate_json_filename(input_path: str, output_dir: str) -> str:
    """
    Generate output JSON filename.

    Args:
        input_path: Input bundle path
        output_dir: Output directory

    Returns:
        Full path like output_dir/<stem>_measurement.json
    """
    stem = Path(input_path).stem
    return str(Path(output_dir) / f"{stem}_measurement.json")


def write_measurements_to_json(
    segments: Sequence[Segment],
    area_sqm: float,
    output_path: str,
    scale: Optional[int] = None,
    method: Optional[str] = None,
    warnings: Optional[List[str]] = None,
    date: Optional[str] = None
) -> str:
    """
    Write a measurement bundle to JSON.

    Args:
        segments: Segments in drawing order
        area_sqm: Real-world area in square meters
        output_path: Output file path
        scale: Display scale (1:scale), recorded as metadata
        method: Area method used, recorded as metadata
        warnings: Validation warnings, recorded as metadata
        date: ISO timestamp (defaults to now, UTC)

    Returns:
        Path to written file

    Raises:
        ValueError: If fewer than 3 segments are given
    """
    if len(segments) < MIN_POLYGON_SEGMENTS:
        raise ValueError(
            f"Need at least {MIN_POLYGON_SEGMENTS} segments to form a closed area, "
            f"got {len(segments)}"
        )

    bundle = Measurements(
        lines=list(segments),
        area=area_sqm,
        date=date or datetime.now(timezone.utc).isoformat(),
    )
    data = bundle.to_dict()

    if scale is not None:
        data["scale"] = scale
    if method is not None:
        data["method"] = method
    if warnings:
        data["warnings"] = list(warnings)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.debug(f"Wrote {len(segments)} segments to {output_path}")
    return str(output_path)


def read_measurements_from_json(
    input_path: str,
    default_length: Optional[float] = None
) -> Measurements:
    """
    Read a measurement bundle (or a bare list of lines) from JSON.

    Args:
        input_path: Path to JSON file
        default_length: Length (m) for lines that do not declare one

    Returns:
        Measurements bundle

    Raises:
        ValueError: If the file is not valid JSON or not a bundle
    """
    with open(input_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {input_path}: {e}") from e

    return Measurements.from_dict(data, default_length)
