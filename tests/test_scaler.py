"""
Real-World Scaler Tests

Tests for the rectangle shortcut, ratio projection and strategy selection.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from plotarea.geometry import Point, Segment, extract_vertices, polygon_area
from plotarea.calibration import (
    AreaEstimate,
    is_rectangle,
    pixel_to_meter_ratios,
    average_ratio,
    select_area_method,
    estimate_real_world_area,
    scale_to_real_world,
)
from plotarea.constants import AreaMethod


def rectangle_segments(width_px, height_px, lengths):
    """Four segments around an axis-aligned rectangle."""
    corners = [
        Point(0, 0),
        Point(width_px, 0),
        Point(width_px, height_px),
        Point(0, height_px),
    ]
    return [
        Segment(i + 1, corners[i], corners[(i + 1) % 4], lengths[i])
        for i in range(4)
    ]


def triangle_segments(ratio=0.1):
    """Right triangle with legs 300/400 px, declared at ratio m per px."""
    a, b, c = Point(0, 0), Point(300, 0), Point(0, 400)
    return [
        Segment(1, a, b, 300 * ratio),
        Segment(2, b, c, 500 * ratio),
        Segment(3, c, a, 400 * ratio),
    ]


def test_fewer_than_three_segments():
    """Test no closed shape gives 0."""
    one = [Segment(1, Point(0, 0), Point(100, 0), 10)]
    two = one + [Segment(2, Point(100, 0), Point(100, 100), 10)]

    assert scale_to_real_world(5000, []) == 0
    assert scale_to_real_world(5000, one) == 0
    assert scale_to_real_world(5000, two) == 0

    print("  [PASS] Fewer than three segments")


def test_rectangle_shortcut_within_tolerance():
    """Test opposite diffs 0.05 and 0.03 use A * B."""
    segments = rectangle_segments(123, 77, [10, 5, 10.05, 4.97])

    assert is_rectangle(segments)
    assert scale_to_real_world(999999, segments) == 50

    print("  [PASS] Rectangle shortcut")


def test_rectangle_shortcut_ignores_pixel_geometry():
    """Test the shortcut result does not depend on drawn size."""
    small = rectangle_segments(20, 10, [20, 10, 20, 10])
    large = rectangle_segments(2000, 50, [20, 10, 20, 10])

    assert scale_to_real_world(200, small) == 200
    assert scale_to_real_world(100000, large) == 200

    print("  [PASS] Shortcut ignores pixels")


def test_rectangle_shortcut_rejected():
    """Test a 0.2 m diff falls through to the ratio path."""
    segments = rectangle_segments(100, 50, [10, 5, 10.2, 4.97])

    assert not is_rectangle(segments)
    assert select_area_method(segments) == AreaMethod.RATIO

    expected_ratio = (10 / 100 + 5 / 50 + 10.2 / 100 + 4.97 / 50) / 4
    estimate = estimate_real_world_area(5000, segments)

    assert estimate.method == AreaMethod.RATIO
    assert estimate.ratio == pytest.approx(expected_ratio)
    assert estimate.area_sqm == pytest.approx(5000 * expected_ratio ** 2)

    print("  [PASS] Rectangle shortcut rejected")


def test_rectangle_tolerance_is_strict():
    """Test a diff equal to the tolerance does not qualify."""
    segments = rectangle_segments(100, 50, [10, 5, 10.5, 5])

    assert not is_rectangle(segments, tolerance=0.5)
    assert is_rectangle(segments, tolerance=0.51)

    print("  [PASS] Strict tolerance")


def test_rectangle_tolerance_is_absolute():
    """Test the tolerance does not scale with side length."""
    long_sides = rectangle_segments(100, 50, [1000, 500, 1000.09, 500.09])
    short_sides = rectangle_segments(100, 50, [1, 0.5, 1.09, 0.59])

    assert is_rectangle(long_sides)
    assert is_rectangle(short_sides)

    print("  [PASS] Absolute tolerance")


def test_not_four_segments_never_rectangle():
    """Test 3 or 5 segments never take the shortcut."""
    assert not is_rectangle(triangle_segments())
    assert select_area_method(triangle_segments()) == AreaMethod.RATIO

    print("  [PASS] Non-quadrilateral")


def test_single_segment_ratio():
    """Test one 10 m segment drawn 100 px long gives ratio 0.1."""
    segment = Segment(1, Point(0, 0), Point(100, 0), 10)

    assert pixel_to_meter_ratios([segment]) == [pytest.approx(0.1)]
    assert average_ratio([segment]) == pytest.approx(0.1)
    assert 2500 * average_ratio([segment]) ** 2 == pytest.approx(25)

    print("  [PASS] Single segment ratio")


def test_general_path_uniform_ratio():
    """Test a triangle at 0.1 m/px scales 2500 px² to 25 m²."""
    segments = triangle_segments(ratio=0.1)

    assert scale_to_real_world(2500, segments) == pytest.approx(25)

    print("  [PASS] Uniform ratio projection")


def test_general_path_end_to_end_triangle():
    """Test the full pipeline on a 300/400/500 px triangle at 0.1 m/px."""
    segments = triangle_segments(ratio=0.1)
    pixel_area = polygon_area(extract_vertices(segments))

    assert pixel_area == 60000
    # 30 m x 40 m right triangle
    assert scale_to_real_world(pixel_area, segments) == pytest.approx(600)

    print("  [PASS] Triangle end to end")


def test_zero_length_segment_excluded():
    """Test a degenerate segment adds no ratio sample."""
    segments = triangle_segments(ratio=0.1) + [
        Segment(4, Point(0, 0), Point(0, 0), 7),
    ]

    ratios = pixel_to_meter_ratios(segments)

    assert len(ratios) == 3
    assert average_ratio(segments) == pytest.approx(0.1)

    estimate = estimate_real_world_area(2500, segments)
    assert estimate.ratio_samples == 3
    assert estimate.area_sqm == pytest.approx(25)

    print("  [PASS] Zero-length segment excluded")


def test_all_zero_length_segments():
    """Test an empty ratio set returns 0 without dividing by zero."""
    p = Point(5, 5)
    segments = [Segment(i, p, p, 10) for i in range(1, 4)]

    assert pixel_to_meter_ratios(segments) == []
    assert average_ratio(segments) == 0.0
    assert scale_to_real_world(1000, segments) == 0

    estimate = estimate_real_world_area(1000, segments)
    assert estimate.method == AreaMethod.NONE

    print("  [PASS] All zero-length segments")


def test_scale_parameter_not_used_in_formula():
    """
    Pin current behavior: the 1:N display scale does not change the area.

    The display scale and the measured pixel-to-meter ratio are separate
    quantities; if they are ever unified this test should change.
    """
    segments = triangle_segments(ratio=0.1)

    baseline = scale_to_real_world(2500, segments)

    assert scale_to_real_world(2500, segments, scale=1) == baseline
    assert scale_to_real_world(2500, segments, scale=100) == baseline
    assert scale_to_real_world(2500, segments, scale=500) == baseline

    print("  [PASS] Scale parameter ignored")


def test_end_to_end_rectangle_scenario():
    """Test 200x100 px rectangle declared as 20 x 10 m gives 200 m²."""
    segments = rectangle_segments(200, 100, [20, 10, 20, 10])
    vertices = extract_vertices(segments)
    pixel_area = polygon_area(vertices)

    assert pixel_area == 20000

    estimate = estimate_real_world_area(pixel_area, segments, scale=100)

    assert estimate.method == AreaMethod.RECTANGLE
    assert estimate.area_sqm == 200

    print("  [PASS] Rectangle end to end")


def test_area_estimate_to_dict():
    """Test estimate serialization."""
    estimate = AreaEstimate(area_sqm=25.000000004, method=AreaMethod.RATIO,
                            ratio=0.1, ratio_samples=3)

    d = estimate.to_dict()

    assert d["area_sqm"] == 25.0
    assert d["method"] == "RATIO"
    assert d["ratio_samples"] == 3

    print("  [PASS] AreaEstimate to_dict")


def run_all_tests():
    """Run all scaler tests."""
    print("\n" + "=" * 60)
    print("Real-World Scaler Tests")
    print("=" * 60)

    tests = [
        test_fewer_than_three_segments,
        test_rectangle_shortcut_within_tolerance,
        test_rectangle_shortcut_ignores_pixel_geometry,
        test_rectangle_shortcut_rejected,
        test_rectangle_tolerance_is_strict,
        test_rectangle_tolerance_is_absolute,
        test_not_four_segments_never_rectangle,
        test_single_segment_ratio,
        test_general_path_uniform_ratio,
        test_general_path_end_to_end_triangle,
        test_zero_length_segment_excluded,
        test_all_zero_length_segments,
        test_scale_parameter_not_used_in_formula,
        test_end_to_end_rectangle_scenario,
        test_area_estimate_to_dict,
    ]

    passed = 0
    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            print(f"  [FAIL] {test.__name__}: {e}")

    print("\n" + "=" * 60)
    print(f"Scaler Results: {passed}/{len(tests)} tests passed")
    print("=" * 60)

    return passed == len(tests)


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
