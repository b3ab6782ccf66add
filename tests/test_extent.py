# test_extent.py

import pytest

from core.errors import EmptyInputError
from core.types import Axis, ExtentRange
from builders.curve_build import build
from builders.extent_build import compute_extent


def test_empty_batch_raises():
    with pytest.raises(EmptyInputError):
        compute_extent([], Axis.Z)


def test_only_first_point_counts():
    low_start = build([(0, 0, -1), (1, 0, 50), (2, 0, 100)])
    high_start = build([(0, 0, 3), (1, 0, 2), (2, 0, -40)])
    extent = compute_extent([low_start, high_start], "z")
    assert extent == ExtentRange(min=-1.0, max=3.0)


@pytest.mark.parametrize("axis, expected", [
    ("x", (1.0, 4.0)),
    (Axis.Y, (2.0, 5.0)),
    (2, (3.0, 6.0)),
])
def test_axis_selection(axis, expected):
    curves = [build([(1, 2, 3), (0, 0, 0)]), build([(4, 5, 6), (0, 0, 0)])]
    extent = compute_extent(curves, axis)
    assert (extent.min, extent.max) == pytest.approx(expected)


def test_single_curve_gives_degenerate_extent():
    extent = compute_extent([build([(0, 0, 0), (0, 1, 2), (0, 2, 0)])], Axis.Z)
    assert extent.min == pytest.approx(0.0, abs=1e-12)
    assert extent.max == pytest.approx(0.0, abs=1e-12)
    assert extent.is_degenerate


@pytest.mark.parametrize("axis", ["w", 3, None])
def test_unknown_axis_raises(axis):
    with pytest.raises(ValueError):
        compute_extent([build([(0, 0, 0), (1, 0, 0)])], axis)


if __name__ == "__main__":
    pytest.main([__file__])
