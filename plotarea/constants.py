"""
Plot Area - Master Constants Reference

Default values for the measurement engine. Any of the tunable values below
can be overridden from config/settings.yaml (see settings.py).
"""

# =============================================================================
# POLYGON CONSTANTS
# =============================================================================

# Minimum segments / vertices for a closed shape
MIN_POLYGON_SEGMENTS = 3
MIN_POLYGON_VERTICES = 3

# First/last point closer than this (drawing units) counts as closed
CLOSURE_TOLERANCE_PX = 5

# Gap between one segment's end and the next segment's start (drawing units)
CONNECTIVITY_TOLERANCE_PX = 5

# =============================================================================
# SCALING CONSTANTS
# =============================================================================

# Opposite declared sides within this many meters -> rectangle shortcut
RECTANGLE_TOLERANCE_M = 0.1

# A rectangle is exactly four sides
RECTANGLE_SEGMENT_COUNT = 4

# =============================================================================
# MEASUREMENT PANEL DEFAULTS
# =============================================================================

# Display ratio "1:N"
DEFAULT_SCALE = 100

# Real-world length given to a freshly drawn segment (meters)
DEFAULT_SEGMENT_LENGTH_M = 10.0

# Decimal places shown for areas
AREA_DISPLAY_DECIMALS = 2

# =============================================================================
# UNIT CONVERSION
# =============================================================================

SQM_PER_HECTARE = 10000
SQM_PER_ARE = 100
SQFT_PER_SQM = 10.7639

# =============================================================================
# AREA METHODS
# =============================================================================

class AreaMethod:
    RECTANGLE = "RECTANGLE"
    RATIO = "RATIO"
    NONE = "NONE"

# =============================================================================
# OUTPUT FORMATS
# =============================================================================

class OutputFormat:
    JSON = "json"
    CSV = "csv"
    BOTH = "both"
