"""
Pipeline Orchestration Module

Runs segments -> vertices -> drawing-space area -> real-world area over one
consistent snapshot of the segment chain, and writes output files.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import (
    DEFAULT_SCALE,
    DEFAULT_SEGMENT_LENGTH_M,
    OutputFormat,
)
from .settings import load_settings
from .geometry.segment import Point, Segment, Measurements
from .geometry.vertices import extract_vertices, is_closed_polygon, check_connectivity
from .geometry.calculator import polygon_area, polygon_perimeter, validate_polygon
from .calibration.scaler import AreaEstimate, estimate_real_world_area
from .calibration.unit_converter import format_area, format_scale
from .output.json_writer import (
    generate_json_filename,
    write_measurements_to_json,
    read_measurements_from_json,
)
from .output.csv_writer import generate_csv_filename, write_segments_to_csv


logger = logging.getLogger(__name__)


@dataclass
class MeasurementConfig:
    """Configuration for pipeline execution."""
    input_path: str
    output_dir: str
    scale: int = DEFAULT_SCALE
    default_length: float = DEFAULT_SEGMENT_LENGTH_M
    output_format: str = OutputFormat.JSON
    validate: bool = True
    settings_path: Optional[str] = None
    verbose: bool = False


@dataclass
class MeasurementResult:
    """Everything derived from one snapshot of the segment chain."""
    segments: List[Segment]
    vertices: List[Point]
    pixel_area: float
    perimeter_px: float
    estimate: AreaEstimate
    scale: int = DEFAULT_SCALE
    closed: bool = False  # drawn outline returns to its start
    warnings: List[str] = field(default_factory=list)

    @property
    def area_sqm(self) -> float:
        return self.estimate.area_sqm

    @property
    def method(self) -> str:
        return self.estimate.method

    def to_measurements(self) -> Measurements:
        """Bundle for persistence/export."""
        return Measurements(lines=list(self.segments), area=self.area_sqm)


@dataclass
class PipelineResult:
    """Result from full pipeline execution."""
    input_file: str
    output_dir: str
    measurement: MeasurementResult
    json_path: Optional[str]
    csv_path: Optional[str]
    processing_time: float


def measure_segments(
    segments: Sequence[Segment],
    scale: int = DEFAULT_SCALE,
    validate: bool = True,
    rectangle_tolerance: Optional[float] = None,
    connectivity_tolerance: Optional[float] = None,
    closure_tolerance: Optional[float] = None
) -> MeasurementResult:
    """
    Measure the real-world area enclosed by a segment chain.

    The segments are copied once so the whole computation sees a single
    snapshot even if the caller mutates its list afterwards.

    Args:
        segments: Segments in drawing order
        scale: Display scale (1:scale); recorded, not used in the formula
        validate: Collect connectivity and shape warnings
        rectangle_tolerance: Override for the rectangle shortcut tolerance (m)
        connectivity_tolerance: Override for the allowed gap between segments
        closure_tolerance: Override for the first/last point closure distance

    Returns:
        MeasurementResult
    """
    snapshot = list(segments)

    vertices = extract_vertices(snapshot)
    pixel_area = polygon_area(vertices)
    perimeter_px = polygon_perimeter(vertices)

    drawn_points = ([snapshot[0].start] + [s.end for s in snapshot]) if snapshot else []
    if closure_tolerance is not None:
        closed = is_closed_polygon(drawn_points, closure_tolerance)
    else:
        closed = is_closed_polygon(drawn_points)

    scale_kwargs = {}
    if rectangle_tolerance is not None:
        scale_kwargs["tolerance"] = rectangle_tolerance
    estimate = estimate_real_world_area(pixel_area, snapshot, scale, **scale_kwargs)

    warnings: List[str] = []
    if validate and snapshot:
        if connectivity_tolerance is not None:
            warnings.extend(check_connectivity(snapshot, connectivity_tolerance))
        else:
            warnings.extend(check_connectivity(snapshot))
        warnings.extend(validate_polygon(vertices))

    for warning in warnings:
        logger.warning(warning)

    logger.debug(
        f"{len(snapshot)} segments, {len(vertices)} vertices, "
        f"{pixel_area:.1f} units², method {estimate.method}"
    )

    return MeasurementResult(
        segments=snapshot,
        vertices=vertices,
        pixel_area=pixel_area,
        perimeter_px=perimeter_px,
        estimate=estimate,
        scale=scale,
        closed=closed,
        warnings=warnings,
    )


def run_pipeline(args) -> PipelineResult:
    """
    Run the measurement pipeline from CLI arguments.

    Args:
        args: Parsed argparse Namespace

    Returns:
        PipelineResult

    Raises:
        ValueError: If the input bundle is malformed or cannot be exported
    """
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(message)s')

    start_time = time.time()

    settings_path = getattr(args, "settings", None)
    settings = load_settings(Path(settings_path) if settings_path else None)
    measurement_defaults = settings["measurement"]

    # Explicit CLI values win over settings.yaml
    config = MeasurementConfig(
        input_path=args.input,
        output_dir=args.output,
        scale=args.scale if args.scale is not None else measurement_defaults["default_scale"],
        default_length=(
            args.default_length if args.default_length is not None
            else measurement_defaults["default_segment_length_m"]
        ),
        output_format=args.format,
        validate=not args.no_validate,
        settings_path=settings_path,
        verbose=args.verbose,
    )

    logger.info(f"Reading {config.input_path}")
    bundle = read_measurements_from_json(config.input_path, config.default_length)
    logger.info(f"Loaded {len(bundle.lines)} segments")

    measurement = measure_segments(
        bundle.lines,
        scale=config.scale,
        validate=config.validate,
        rectangle_tolerance=settings["scaling"]["rectangle_tolerance_m"],
        connectivity_tolerance=settings["polygon"]["connectivity_tolerance_px"],
        closure_tolerance=settings["polygon"]["closure_tolerance_px"],
    )

    logger.info(
        f"Area: {format_area(measurement.area_sqm)} "
        f"({measurement.method}, scale {format_scale(config.scale)})"
    )

    json_path = None
    if config.output_format in (OutputFormat.JSON, OutputFormat.BOTH):
        json_path = write_measurements_to_json(
            measurement.segments,
            measurement.area_sqm,
            generate_json_filename(config.input_path, config.output_dir),
            scale=config.scale,
            method=measurement.method,
            warnings=measurement.warnings,
        )
        logger.info(f"JSON written: {json_path}")

    csv_path = None
    if config.output_format in (OutputFormat.CSV, OutputFormat.BOTH):
        csv_path = write_segments_to_csv(
            measurement.segments,
            generate_csv_filename(config.input_path, config.output_dir),
        )
        logger.info(f"CSV written: {csv_path}")

    processing_time = time.time() - start_time
    logger.debug(f"Finished in {processing_time:.3f}s")

    return PipelineResult(
        input_file=config.input_path,
        output_dir=config.output_dir,
        measurement=measurement,
        json_path=json_path,
        csv_path=csv_path,
        processing_time=processing_time,
    )
