# test_sampling.py

import numpy as np
import pytest

from builders.curve_build import build
from builders.build_modules.resample_points import marker_count, sample, sample_with_phases


def test_straight_line_of_length_ten_gives_five_points():
    curve = build([(0, 0, 0), (10, 0, 0)])
    pts = sample(curve, density=0.5)
    assert pts.shape == (5, 3)
    # all on the line, increasing along it
    np.testing.assert_allclose(pts[:, 1:], 0.0, atol=1e-9)
    assert np.all(np.diff(pts[:, 0]) > 0)
    np.testing.assert_allclose(pts[:, 0], [0, 2, 4, 6, 8], atol=1e-6)


def test_count_grows_with_length():
    short = build([(0, 0, 0), (10, 0, 0)])
    long = build([(0, 0, 0), (40, 0, 0)])
    assert marker_count(short) == 5
    assert marker_count(long) == 20


def test_short_curve_gives_no_points():
    curve = build([(0, 0, 0), (1, 0, 0)])
    pts = sample(curve, density=0.5)
    assert pts.shape == (0, 3)
    assert sample_with_phases(curve, density=0.5) == []


def test_points_are_evenly_spaced_by_arc_length():
    """Locate each returned point on a dense trace and compare its travelled length."""
    curve = build([(0, 0, 0), (0.5, 0, 0), (8, 3, 0), (20, 0, 1)])
    pts = sample(curve, density=1.0)
    n = len(pts)
    assert n > 5

    dense_t = np.linspace(0.0, 1.0, 4001)
    dense = curve.evaluate_many(dense_t)
    nearest = [int(np.argmin(np.linalg.norm(dense - p, axis=1))) for p in pts]
    travelled = np.array([curve.length_at(dense_t[j]) for j in nearest])
    np.testing.assert_allclose(travelled, np.arange(n) * curve.length() / n, atol=0.05)

    chords = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    np.testing.assert_allclose(chords, curve.length() / n, rtol=2e-2)

    # equal parameter steps would land elsewhere on this uneven input
    by_parameter = curve.evaluate_many(np.arange(n) / n)
    assert np.max(np.linalg.norm(by_parameter - pts, axis=1)) > 0.5


def test_phases_follow_index():
    curve = build([(0, 0, 0), (10, 0, 0)])
    phases = [phase for _, phase in sample_with_phases(curve)]
    assert phases == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8])


if __name__ == "__main__":
    pytest.main([__file__])
