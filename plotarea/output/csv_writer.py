"""
CSV Writer Module

Writes one row per segment with its pixel length and meters-per-pixel ratio.
"""

import csv
import logging
from pathlib import Path
from typing import Any, List, Sequence

from ..geometry.segment import Segment

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "id",
    "start_x",
    "start_y",
    "end_x",
    "end_y",
    "length_m",
    "pixel_length",
    "ratio_m_per_px",
]


def segment_to_csv_row(segment: Segment) -> List[Any]:
    """Convert a segment to CSV row values."""
    pixel_length = segment.pixel_length
    ratio = round(segment.length / pixel_length, 6) if pixel_length > 0 else ""

    return [
        segment.id,
        segment.start.x,
        segment.start.y,
        segment.end.x,
        segment.end.y,
        segment.length,
        round(pixel_length, 2),
        ratio,
    ]


def generate_csv_filename(input_path: str, output_dir: str) -> str:
    """Full path like output_dir/<stem>_segments.csv."""
    stem = Path(input_path).stem
    return str(Path(output_dir) / f"{stem}_segments.csv")


def write_segments_to_csv(segments: Sequence[Segment], output_path: str) -> str:
    """
    Write segments to CSV.

    Args:
        segments: Segments in drawing order
        output_path: Output file path

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for segment in segments:
            writer.writerow(segment_to_csv_row(segment))

    logger.debug(f"Wrote {len(segments)} rows to {output_path}")
    return str(output_path)
