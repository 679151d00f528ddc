"""
Unit Converter Module

Functions for converting and formatting real-world areas and display scales.
"""

import logging
import re

from ..constants import (
    AREA_DISPLAY_DECIMALS,
    SQM_PER_HECTARE,
    SQM_PER_ARE,
    SQFT_PER_SQM,
)

logger = logging.getLogger(__name__)


def convert_area(area_sqm: float, output_unit: str = "sqm") -> float:
    """
    Convert an area from square meters.

    Args:
        area_sqm: Area in square meters
        output_unit: Target unit - "sqm", "ha", "are", "sqft"

    Returns:
        Area in requested unit
    """
    if output_unit == "sqm":
        return area_sqm
    elif output_unit == "ha":
        return area_sqm / SQM_PER_HECTARE
    elif output_unit == "are":
        return area_sqm / SQM_PER_ARE
    elif output_unit == "sqft":
        return area_sqm * SQFT_PER_SQM
    else:
        logger.warning(f"Unknown unit '{output_unit}', returning sqm")
        return area_sqm


def format_area(area_sqm: float, unit: str = "sqm") -> str:
    """
    Format an area with unit.

    Args:
        area_sqm: Area in square meters
        unit: Display unit

    Returns:
        Formatted string like "200.00 m²" or "0.02 ha"
    """
    value = convert_area(area_sqm, unit)

    if unit == "sqm":
        return f"{value:.{AREA_DISPLAY_DECIMALS}f} m²"
    elif unit == "ha":
        return f"{value:.4f} ha"
    elif unit == "sqft":
        return f"{value:.1f} SF"
    else:
        return f"{value:.{AREA_DISPLAY_DECIMALS}f} {unit}"


def format_scale(scale: int) -> str:
    """Format a display scale as "1:N"."""
    return f"1:{scale}"


def parse_scale_ratio(scale_string: str) -> int:
    """
    Parse a display scale like "1:100" or "100".

    Args:
        scale_string: Scale string

    Returns:
        The N of 1:N

    Raises:
        ValueError: If the format is invalid or N is not positive
    """
    match = re.match(r"^\s*(?:1\s*:\s*)?(\d+)\s*$", str(scale_string))
    if not match:
        raise ValueError(f"Invalid scale format: {scale_string}")

    scale = int(match.group(1))
    if scale <= 0:
        raise ValueError(f"Scale must be positive: {scale_string}")

    return scale
