# core/pipeline.py

from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from pytictoc import TicToc
t = TicToc()

from core.types import Axis, CurveLine, ExtentRange, Marker
from builders.build_modules.catmull_rom import CatmullRomCurve
from builders.curve_build import build_curves
from builders.extent_build import compute_extent
from builders.attribute_build import build_curve_lines
from builders.marker_build import create_all_markers
from builders.animate import advance_all

# -----------------------------
# Configuration Parameters
# -----------------------------

from core.config import (
    optionsConfig,
    SamplingSettings,
    AnimationSettings,
    GradientSettings,
    MarkerSettings
                            )

options = optionsConfig()
sampling = SamplingSettings()
animation = AnimationSettings()
gradients = GradientSettings()
marker_settings = MarkerSettings()


@dataclass(eq=False)
class SceneSegment:
    """
    Everything built from one loaded batch of polylines.

    `curves` is the arena: markers and lines hold read-only references into it.
    Call tick() once per frame with the frame's elapsed time.
    """
    curves: List[CatmullRomCurve]
    extent: ExtentRange
    axis: Axis
    lines: List[CurveLine] = field(default_factory=list)
    markers: List[Marker] = field(default_factory=list)
    marker_radius: float = marker_settings.radius
    rate: float = animation.rate
    constant_speed: bool = animation.constant_speed

    def tick(self, elapsed_seconds: float) -> np.ndarray:
        """Advance all markers with one elapsed time; returns their (N, 3) positions."""
        return advance_all(self.markers, elapsed_seconds, self.rate, self.constant_speed)

    def positions(self) -> np.ndarray:
        if not self.markers:
            return np.empty((0, 3))
        return np.array([m.position for m in self.markers])

    def colors(self) -> np.ndarray:
        if not self.markers:
            return np.empty((0, 3))
        return np.array([m.color for m in self.markers])

    def clear(self) -> None:
        """Drop every curve, line and marker reference."""
        self.markers = []
        self.lines = []
        self.curves = []


def build_scene_segment(polylines: Iterable,
                        world_transform=None,
                        axis=gradients.extent_axis,
                        density: float = sampling.density) -> SceneSegment:
    """
    polylines -> curves -> extent -> (lines, markers).

    Any malformed polyline, or an empty batch, aborts the whole segment.
    """
    if options.verbose:
        print("Preparing scene segment")
    t.tic()

    ax = Axis.parse(axis)
    curve_list = build_curves(polylines, world_transform)
    extent = compute_extent(curve_list, ax)

    if options.verbose:
        print(f"Built {len(curve_list)} curves")
        print(f"min{ax.name}: {extent.min}")
        print(f"max{ax.name}: {extent.max}")

    lines = build_curve_lines(curve_list, extent, ax)
    markers = create_all_markers(curve_list, extent, density)

    if options.verbose:
        print(f"Seeded {len(markers)} markers")
        t.toc("Scene segment build time:")

    return SceneSegment(
        curves=curve_list,
        extent=extent,
        axis=ax,
        lines=lines,
        markers=markers,
    )
