"""
Settings Module

Loads optional overrides from config/settings.yaml on top of the defaults
in constants.py.

The settings file lives at the project root, next to the package. An
install that does not carry config/ (a wheel, for instance) runs on the
constants.py defaults, which the shipped file mirrors; pass an explicit
path (--settings on the command line) to use overrides there.
"""

import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CLOSURE_TOLERANCE_PX,
    CONNECTIVITY_TOLERANCE_PX,
    RECTANGLE_TOLERANCE_M,
    DEFAULT_SCALE,
    DEFAULT_SEGMENT_LENGTH_M,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "config" / "settings.yaml"

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "polygon": {
        "closure_tolerance_px": CLOSURE_TOLERANCE_PX,
        "connectivity_tolerance_px": CONNECTIVITY_TOLERANCE_PX,
    },
    "scaling": {
        "rectangle_tolerance_m": RECTANGLE_TOLERANCE_M,
    },
    "measurement": {
        "default_scale": DEFAULT_SCALE,
        "default_segment_length_m": DEFAULT_SEGMENT_LENGTH_M,
    },
}

# Settings that must be whole numbers; every other value may be int or float
INTEGER_SETTINGS = {("measurement", "default_scale")}


def _check_setting(section: str, key: str, value: Any) -> Any:
    """
    Validate one override value.

    Every setting is a positive, finite number.

    Raises:
        ValueError: Naming section.key when the value is unusable
    """
    name = f"{section}.{key}"

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Setting '{name}' must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Setting '{name}' must be positive, got {value!r}")
    if (section, key) in INTEGER_SETTINGS:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Setting '{name}' must be a whole number, got {value!r}")
        return int(value)

    return value


def load_settings(path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load settings, merging YAML overrides over the defaults.

    A missing file is not an error; the defaults are returned unchanged.
    Unknown sections and keys in the file are ignored with a warning.

    Args:
        path: Settings file (defaults to config/settings.yaml)

    Returns:
        Nested dict of settings keyed by section

    Raises:
        ValueError: If the file is not a YAML mapping or a value is not a
            positive number
    """
    settings = {section: dict(values) for section, values in DEFAULT_SETTINGS.items()}

    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        logger.debug(f"No settings file at {settings_path}, using defaults")
        return settings

    with open(settings_path) as f:
        overrides = yaml.safe_load(f) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    for section, values in overrides.items():
        if section not in settings or not isinstance(values, dict):
            logger.warning(f"Ignoring unknown settings section '{section}'")
            continue
        for key, value in values.items():
            if key not in settings[section]:
                logger.warning(f"Ignoring unknown setting '{section}.{key}'")
                continue
            settings[section][key] = _check_setting(section, key, value)

    logger.debug(f"Settings loaded from {settings_path}")
    return settings
