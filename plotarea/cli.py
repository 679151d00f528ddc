"""
Command Line Interface Module

Parses command-line arguments for the plot area pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_SCALE,
    DEFAULT_SEGMENT_LENGTH_M,
    OutputFormat,
)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the pipeline."""
    parser = argparse.ArgumentParser(
        prog="plotarea",
        description="Compute the real-world area of a traced land plot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m plotarea.cli -i plot.json -o ./output
  python -m plotarea.cli -i plot.json -o ./output --scale 200 --format both
  python -m plotarea.cli -i lines.json -o ./output --default-length 12.5 -v
        """
    )

    # Required arguments
    parser.add_argument(
        "-i", "--input",
        required=True,
        help="Input JSON file ({lines, area} bundle or a list of lines)"
    )

    parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output directory path"
    )

    # Optional arguments
    parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help=f"Display scale 1:N, recorded in the output (default: {DEFAULT_SCALE})"
    )

    parser.add_argument(
        "--default-length",
        type=float,
        default=None,
        help=f"Length in meters for lines without one (default: {DEFAULT_SEGMENT_LENGTH_M})"
    )

    parser.add_argument(
        "--format",
        choices=[OutputFormat.JSON, OutputFormat.CSV, OutputFormat.BOTH],
        default=OutputFormat.JSON,
        help="Output format (default: json)"
    )

    parser.add_argument(
        "--settings",
        help="Settings YAML file (default: config/settings.yaml)"
    )

    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip connectivity and self-intersection checks"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def validate_args(args: argparse.Namespace) -> Tuple[bool, str]:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments

    Returns:
        Tuple of (is_valid, error_message)
    """
    # Check input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        return False, f"Input file not found: {args.input}"

    if not input_path.suffix.lower() == ".json":
        return False, f"Input file must be JSON: {args.input}"

    # Check/create output directory
    output_path = Path(args.output)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return False, f"Cannot create output directory: {e}"

    if args.scale is not None and args.scale <= 0:
        return False, f"Scale must be a positive integer: {args.scale}"

    if args.default_length is not None and not args.default_length > 0:
        return False, f"Default length must be positive: {args.default_length}"

    if args.settings and not Path(args.settings).exists():
        return False, f"Settings file not found: {args.settings}"

    return True, ""


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    Args:
        args: Optional list of arguments (uses sys.argv if None)

    Returns:
        Parsed and validated arguments
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    is_valid, error_msg = validate_args(parsed)
    if not is_valid:
        parser.error(error_msg)

    return parsed


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    args = parse_args(argv)

    # Import pipeline and run
    from .pipeline import run_pipeline

    try:
        run_pipeline(args)
    except KeyboardInterrupt:
        print("\nProcessing cancelled by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
