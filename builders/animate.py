# builders/animate.py

from typing import Sequence

import numpy as np

from core.types import Marker
from core.config import AnimationSettings

animation = AnimationSettings()


def wrap_phase(phase: float) -> float:
    """True modulo into [0, 1), also for negative input."""
    t = float(phase) % 1.0
    # -1e-17 % 1.0 rounds to 1.0
    if t >= 1.0:
        t -= 1.0
    return t


def phase_at(marker: Marker, elapsed_seconds: float, rate: float = animation.rate) -> float:
    return wrap_phase(marker.initial_phase + elapsed_seconds * rate)


def _position(marker: Marker, t: float, constant_speed: bool) -> np.ndarray:
    if constant_speed:
        return marker.curve.point_at(t)
    return marker.curve.evaluate(t)


def advance(marker: Marker, elapsed_seconds: float,
            rate: float = animation.rate,
            constant_speed: bool = animation.constant_speed) -> np.ndarray:
    """
    Position of `marker` after `elapsed_seconds`.

    Pure in (initial_phase, elapsed_seconds, curve): the marker is not modified.
    With constant_speed (default) the phase is read as an arc-length fraction,
    the same parameterisation the markers are seeded with; otherwise it is the
    raw curve parameter passed to curve.evaluate.
    """
    return _position(marker, phase_at(marker, elapsed_seconds, rate), constant_speed)


def advance_all(markers: Sequence[Marker], elapsed_seconds: float,
                rate: float = animation.rate,
                constant_speed: bool = animation.constant_speed) -> np.ndarray:
    """
    Advance every marker with the same elapsed time and store the results on
    the markers (position, phase). Returns an (N, 3) array of positions.
    """
    elapsed = float(elapsed_seconds)
    out = np.empty((len(markers), 3))
    for i, marker in enumerate(markers):
        t = phase_at(marker, elapsed, rate)
        marker.phase = t
        marker.position = _position(marker, t, constant_speed)
        out[i] = marker.position
    return out
