# builders/build_modules/resample_points.py

import math
from typing import List, Tuple

import numpy as np

from core.config import SamplingSettings
from builders.build_modules.catmull_rom import CatmullRomCurve

sampling = SamplingSettings()

# absorbs table round-off so a length of exactly 10 at density 0.5 gives 5, not 4
_COUNT_EPS = 1e-9


def marker_count(curve: CatmullRomCurve, density: float = sampling.density) -> int:
    """floor(length * density); longer curves get proportionally more markers."""
    return max(0, int(math.floor(curve.length() * density + _COUNT_EPS)))


def sample(curve: CatmullRomCurve, density: float = sampling.density) -> np.ndarray:
    """
    Resample a curve to marker_count() points evenly by arc length.

    Point i sits at arc-length fraction i / count (the end point is left out,
    it coincides with phase 1 == phase 0 of the cycle). A curve too short for a
    single marker gives an empty (0, 3) array.
    """
    count = marker_count(curve, density)
    if count == 0:
        return np.empty((0, 3))
    return curve.spaced_points(count, include_end=False)


def sample_with_phases(curve: CatmullRomCurve,
                       density: float = sampling.density) -> List[Tuple[np.ndarray, float]]:
    """Pair every sampled point with its initial phase index / count."""
    pts = sample(curve, density)
    count = len(pts)
    return [(pts[i], i / count) for i in range(count)]
