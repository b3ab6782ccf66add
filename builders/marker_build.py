# builders/marker_build.py

from typing import List, Sequence

from core.types import ExtentRange, Marker
from core.config import AttributeSettings, GradientSettings, SamplingSettings

from builders.attribute_build import export_heights
from builders.build_modules.catmull_rom import CatmullRomCurve
from builders.build_modules.gradient_helpers import Gradient
from builders.build_modules.resample_points import sample_with_phases

attributes = AttributeSettings()
gradients = GradientSettings()
sampling = SamplingSettings()

marker_tint = Gradient(gradients.marker_low, gradients.marker_high)


def create_markers(curve: CatmullRomCurve, extent: ExtentRange,
                   density: float = sampling.density) -> List[Marker]:
    """
    Seed markers along one curve at equal arc-length steps.

    Marker i gets initial_phase = i / count and a color from its own scaled
    height (y * height_scale) against the batch extent, so the tint varies
    along the curve.
    """
    seeds = sample_with_phases(curve, density)
    if not seeds:
        return []

    heights = export_heights(curve, [pos for pos, _ in seeds], attributes.height_scale)
    return [
        Marker(
            curve=curve,
            initial_phase=phase,
            color=marker_tint.color_at(height, extent),
            position=pos,
        )
        for (pos, phase), height in zip(seeds, heights)
    ]


def create_all_markers(curve_list: Sequence[CatmullRomCurve], extent: ExtentRange,
                       density: float = sampling.density) -> List[Marker]:
    markers = []
    for curve in curve_list:
        markers.extend(create_markers(curve, extent, density))
    return markers
