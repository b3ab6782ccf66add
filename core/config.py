# core/config.py

from dataclasses import dataclass


@dataclass
class optionsConfig:
    verbose: bool = True                # print build progress / timings
    plot_preview_flag: bool = False     # If True, the demo exports a PNG preview of the first frame


@dataclass
class CurveSettings:
    alpha: float = 0.5                  # 0.5 = centripetal (0 = uniform, 1 = chordal)
    min_points: int = 2                 # distinct knot points required to build a curve
    arc_length_divisions: int = 200     # resolution of the cumulative length table
    line_divisions: int = 300           # dense sampling for line primitives (-> 301 vertices)
    degenerate_tolerance: float = 1e-4  # knot spacing below this is treated as zero


@dataclass
class SamplingSettings:
    density: float = 0.5                # markers per unit of curve length


@dataclass
class AnimationSettings:
    rate: float = 0.02                  # parameter units per second
    constant_speed: bool = True         # phase is an arc-length fraction (matches marker seeding); False = raw curve parameter


@dataclass
class GradientSettings:
    # per-curve tint, driven by the height of the curve start
    curve_low: str = "#dd25e1"
    curve_high: str = "#0e41f5"
    # per-marker tint, driven by the marker's own (scaled) height
    marker_low: str = "#ea18ce"
    marker_high: str = "#0000ff"
    extent_axis: str = "z"


@dataclass
class AttributeSettings:
    height_scale: float = 2.5           # visual exaggeration, not a physical unit
    attribute_name: str = "vertexHeight"


@dataclass
class MarkerSettings:
    radius: float = 0.05
