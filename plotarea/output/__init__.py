# Output module: JSON bundles and CSV segment tables

from .json_writer import (
    generate_json_filename,
    write_measurements_to_json,
    read_measurements_from_json,
)

from .csv_writer import (
    CSV_HEADER,
    segment_to_csv_row,
    generate_csv_filename,
    write_segments_to_csv,
)

__all__ = [
    # JSON
    "generate_json_filename",
    "write_measurements_to_json",
    "read_measurements_from_json",
    # CSV
    "CSV_HEADER",
    "segment_to_csv_row",
    "generate_csv_filename",
    "write_segments_to_csv",
]
