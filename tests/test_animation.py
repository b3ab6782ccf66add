# test_animation.py

import numpy as np
import pytest

from core.types import Marker
from builders.curve_build import build
from builders.animate import advance, advance_all, phase_at, wrap_phase

RATE = 0.02


@pytest.fixture
def curve():
    return build([(0, 0, 0), (1, 2, 0), (4, 2, 1), (6, -1, 3)])


def _marker(curve, phase=0.25):
    return Marker(curve=curve, initial_phase=phase, color=(1.0, 1.0, 1.0),
                  position=curve.evaluate(phase))


@pytest.mark.parametrize("value, expected", [
    (0.25, 0.25),
    (1.25, 0.25),
    (-0.25, 0.75),
    (-3.0, 0.0),
    (-1e-17, 0.0),
])
def test_wrap_phase_is_true_modulo(value, expected):
    t = wrap_phase(value)
    assert 0.0 <= t < 1.0
    assert t == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("elapsed", [0.0, 3.7, 49.99, 123.4])
@pytest.mark.parametrize("n", [1, 3, -2])
def test_animation_is_periodic(curve, elapsed, n):
    marker = _marker(curve)
    a = advance(marker, elapsed, rate=RATE)
    b = advance(marker, elapsed + n / RATE, rate=RATE)
    np.testing.assert_allclose(a, b, atol=1e-7)


def test_advance_evaluates_curve_at_shifted_phase(curve):
    marker = _marker(curve, 0.1)
    np.testing.assert_allclose(advance(marker, 10.0, rate=RATE, constant_speed=False),
                               curve.evaluate(0.3), atol=1e-12)
    np.testing.assert_allclose(advance(marker, 10.0, rate=RATE), curve.point_at(0.3), atol=1e-12)


def test_advance_does_not_touch_marker(curve):
    marker = _marker(curve)
    before = marker.position.copy()
    advance(marker, 12.0)
    np.testing.assert_array_equal(marker.position, before)
    assert marker.phase == 0.25


def test_phase_defaults_to_initial_phase(curve):
    marker = _marker(curve, phase=0.4)
    assert marker.phase == 0.4
    resumed = Marker(curve=curve, initial_phase=0.4, color=(0, 0, 0),
                     position=(0, 0, 0), phase=0.7)
    assert resumed.phase == 0.7
    assert resumed.initial_phase == 0.4


def test_negative_elapsed_stays_on_curve(curve):
    marker = _marker(curve, 0.0)
    assert phase_at(marker, -5.0, RATE) == pytest.approx(0.9)
    np.testing.assert_allclose(advance(marker, -5.0, rate=RATE), curve.point_at(0.9), atol=1e-12)


def test_constant_speed_uses_arc_length(curve):
    marker = _marker(curve, 0.5)
    np.testing.assert_allclose(advance(marker, 0.0, constant_speed=True), curve.point_at(0.5))


def test_advance_all_uses_one_elapsed_value(curve):
    markers = [_marker(curve, p) for p in (0.0, 0.3, 0.6, 0.9)]
    positions = advance_all(markers, 20.0, rate=RATE)
    assert positions.shape == (4, 3)
    for marker, pos, p in zip(markers, positions, (0.0, 0.3, 0.6, 0.9)):
        expected_phase = wrap_phase(p + 20.0 * RATE)
        assert marker.phase == pytest.approx(expected_phase)
        np.testing.assert_allclose(marker.position, pos)
        np.testing.assert_allclose(pos, curve.point_at(expected_phase), atol=1e-12)


def test_marker_requires_a_curve():
    with pytest.raises(TypeError):
        Marker(initial_phase=0.0, color=(0, 0, 0), position=(0, 0, 0))


@pytest.mark.parametrize("phase", [-0.1, 1.0, 2.0])
def test_marker_phase_must_be_in_unit_interval(curve, phase):
    with pytest.raises(ValueError):
        Marker(curve=curve, initial_phase=phase, color=(0, 0, 0), position=(0, 0, 0))


if __name__ == "__main__":
    pytest.main([__file__])
