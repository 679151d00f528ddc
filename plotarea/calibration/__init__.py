# Real-world scaling module

from .scaler import (
    AreaEstimate,
    is_rectangle,
    pixel_to_meter_ratios,
    average_ratio,
    select_area_method,
    estimate_real_world_area,
    scale_to_real_world,
)

from .unit_converter import (
    convert_area,
    format_area,
    format_scale,
    parse_scale_ratio,
)

__all__ = [
    # Scaler
    "AreaEstimate",
    "is_rectangle",
    "pixel_to_meter_ratios",
    "average_ratio",
    "select_area_method",
    "estimate_real_world_area",
    "scale_to_real_world",
    # Unit Converter
    "convert_area",
    "format_area",
    "format_scale",
    "parse_scale_ratio",
]
