#!/usr/bin/env python
"""
Plot Area - Installation Verification Script

Run this script to verify all dependencies are correctly installed.
"""

import sys
from pathlib import Path

# Add project root to path for package import
sys.path.insert(0, str(Path(__file__).parent.parent))


def check_package(name: str, import_name: str = None, version_attr: str = "__version__") -> tuple[bool, str]:
    """Check if a package is installed and return version."""
    import_name = import_name or name
    try:
        module = __import__(import_name)
        version = getattr(module, version_attr, "unknown")
        return True, str(version)
    except ImportError as e:
        return False, str(e)


def check_constants() -> tuple[bool, str]:
    """Check if constants module loads correctly."""
    try:
        from plotarea.constants import (
            RECTANGLE_TOLERANCE_M,
            DEFAULT_SCALE,
            AreaMethod,
        )
        return True, f"loaded ({RECTANGLE_TOLERANCE_M=}, {DEFAULT_SCALE=}, {AreaMethod.RATIO=})"
    except ImportError as e:
        return False, str(e)


def check_settings() -> tuple[bool, str]:
    """Check if settings.yaml loads correctly."""
    try:
        from plotarea.settings import DEFAULT_SETTINGS_PATH, load_settings
        if not DEFAULT_SETTINGS_PATH.exists():
            return False, "settings.yaml not found"
        settings = load_settings()
        return True, f"sections: {', '.join(settings.keys())}"
    except (ImportError, ValueError) as e:
        return False, str(e)


def check_engine() -> tuple[bool, str]:
    """Measure a known rectangle through the full engine."""
    try:
        from plotarea import Point, Segment, measure_segments
        corners = [Point(0, 0), Point(200, 0), Point(200, 100), Point(0, 100)]
        lengths = [20, 10, 20, 10]
        segments = [
            Segment(i + 1, corners[i], corners[(i + 1) % 4], lengths[i])
            for i in range(4)
        ]
        result = measure_segments(segments)
        if result.area_sqm != 200:
            return False, f"expected 200 m², got {result.area_sqm}"
        return True, f"200 m² via {result.method}"
    except ImportError as e:
        return False, str(e)


def main():
    print("=" * 60)
    print("Plot Area - Installation Verification")
    print("=" * 60)
    print()

    results = []

    # Core packages
    print("Core Dependencies:")
    print("-" * 40)

    packages = [
        ("shapely", "shapely", "__version__"),
        ("numpy", "numpy", "__version__"),
        ("pyyaml", "yaml", "__version__"),
    ]

    for name, import_name, version_attr in packages:
        ok, info = check_package(name, import_name, version_attr)
        status = "PASS" if ok else "FAIL"
        print(f"  {name:25} [{status}] {info}")
        results.append((name, ok))

    print()
    print("Configuration:")
    print("-" * 40)

    # Constants
    ok, info = check_constants()
    status = "PASS" if ok else "FAIL"
    print(f"  {'constants.py':25} [{status}] {info}")
    results.append(("constants", ok))

    # Settings
    ok, info = check_settings()
    status = "PASS" if ok else "FAIL"
    print(f"  {'settings.yaml':25} [{status}] {info}")
    results.append(("settings", ok))

    print()
    print("Engine:")
    print("-" * 40)

    ok, info = check_engine()
    status = "PASS" if ok else "FAIL"
    print(f"  {'measure_segments':25} [{status}] {info}")
    results.append(("engine", ok))

    print()
    print("=" * 60)

    # Summary
    passed = sum(1 for _, ok in results if ok)
    total = len(results)

    if passed == total:
        print(f"ALL CHECKS PASSED ({passed}/{total})")
        print("Environment is ready for plot measurement.")
        return 0
    else:
        failed = [name for name, ok in results if not ok]
        print(f"SOME CHECKS FAILED ({passed}/{total})")
        print(f"Failed: {', '.join(failed)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
