# builders/attribute_build.py

from typing import List, Sequence

import numpy as np

from core.types import Axis, CurveLine, ExtentRange
from core.config import AttributeSettings, CurveSettings, GradientSettings
from builders.build_modules.catmull_rom import CatmullRomCurve
from builders.build_modules.gradient_helpers import Gradient

attributes = AttributeSettings()
curves = CurveSettings()
gradients = GradientSettings()

curve_tint = Gradient(gradients.curve_low, gradients.curve_high)


def export_heights(curve: CatmullRomCurve, sample_points,
                   scale: float = attributes.height_scale) -> np.ndarray:
    """
    One shading scalar per sample point: y * scale, in input order.
    `curve` is the curve the samples were taken from; it only ties the buffer to its source.
    """
    pts = np.asarray(sample_points, dtype=float).reshape(-1, 3)
    return pts[:, 1] * float(scale)


def build_curve_line(curve: CatmullRomCurve, extent: ExtentRange, axis="z",
                     divisions: int = curves.line_divisions) -> CurveLine:
    """Dense line primitive for one curve, tinted by the height of its start."""
    ax = Axis.parse(axis)
    pts = curve.points(divisions)
    return CurveLine(
        curve=curve,
        points=pts,
        vertex_height=export_heights(curve, pts),
        color=curve_tint.color_at(float(pts[0][ax.value]), extent),
        uniforms={"min": extent.min, "max": extent.max},
        attribute_name=attributes.attribute_name,
    )


def build_curve_lines(curve_list: Sequence[CatmullRomCurve], extent: ExtentRange,
                      axis="z") -> List[CurveLine]:
    return [build_curve_line(c, extent, axis) for c in curve_list]
