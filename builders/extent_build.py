# builders/extent_build.py

from typing import Sequence

from core.types import Axis, ExtentRange
from core.errors import EmptyInputError
from builders.build_modules.catmull_rom import CatmullRomCurve


def compute_extent(curve_list: Sequence[CatmullRomCurve], axis="z") -> ExtentRange:
    """
    Min / max of one coordinate over the *first* point (t = 0) of each curve.

    Curves are ranked by where they start, so the resulting gradient tells
    curves apart rather than positions along a single curve.
    """
    ax = Axis.parse(axis)
    if not curve_list:
        raise EmptyInputError("Cannot compute an extent over zero curves.")

    starts = [float(c.evaluate(0.0)[ax.value]) for c in curve_list]
    return ExtentRange(min=min(starts), max=max(starts))
