# builders/build_modules/gradient_helpers.py

from dataclasses import dataclass

from matplotlib import colors as mcolors

from core.types import Color, ExtentRange


def normalize(value: float, extent: ExtentRange) -> float:
    """Position of value inside extent, clamped to [0, 1]; 0 for a degenerate extent."""
    if extent.is_degenerate:
        return 0.0
    t = (float(value) - extent.min) / extent.span
    return min(max(t, 0.0), 1.0)


def lerp_color(low: Color, high: Color, t: float) -> Color:
    """Per-channel linear blend of two sRGB colors."""
    return tuple(float(a + (b - a) * t) for a, b in zip(low, high))


def color_at(value: float, extent: ExtentRange, low, high) -> Color:
    """
    Interpolated color for `value` inside `extent`.
    low / high may be any color matplotlib understands ('#dd25e1', (r, g, b), 'blue', ...).
    """
    lo = mcolors.to_rgb(low)
    hi = mcolors.to_rgb(high)
    t = normalize(value, extent)
    if t == 0.0:
        return lo
    if t == 1.0:
        return hi
    return lerp_color(lo, hi, t)


@dataclass(frozen=True)
class Gradient:
    """A fixed pair of endpoint colors."""
    low: str
    high: str

    def color_at(self, value: float, extent: ExtentRange) -> Color:
        return color_at(value, extent, self.low, self.high)

    def hex_at(self, value: float, extent: ExtentRange) -> str:
        return mcolors.to_hex(self.color_at(value, extent))
