"""
Interactive curve-marker demo

Builds a small batch of wavy polylines (Z-up, like imported CAD line data),
rotates them into the Y-up world the way the scene does (-90 deg about X),
and shows the curve lines plus the animated markers. A Matplotlib slider
scrubs the elapsed time; every marker is advanced with the same value.

Usage:
  python flow_markers_demo.py
  python flow_markers_demo.py --export     (write a PNG of the first frame instead)

Requirements:
  - geomdl, numpy, matplotlib, pytictoc
"""

from __future__ import annotations

import argparse
import math

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.widgets import Slider

from core.pipeline import build_scene_segment
from core.config import optionsConfig, AnimationSettings
from builders.build_modules.transform_helpers import rotation_matrix_x
from io_modules.plotting import draw_segment, plot_segment
from io_modules.exporting import export_plot

options = optionsConfig()
animation = AnimationSettings()


def make_polylines(n_lines: int = 6, n_points: int = 9, span: float = 20.0):
    """Flat [x, y, z, ...] buffers, unevenly spaced along x, stacked along y."""
    rng = np.random.default_rng(7)
    polylines = []
    for k in range(n_lines):
        xs = np.sort(rng.uniform(0.0, span, n_points))
        xs[0], xs[-1] = 0.0, span
        y = 1.5 * k
        zs = 1.2 * np.sin(xs / span * 2.0 * math.pi + k * 0.6) + 0.4 * k
        pts = np.column_stack([xs, np.full_like(xs, y), zs])
        polylines.append(pts.ravel())
    return polylines


def main():
    ap = argparse.ArgumentParser(description="Curve marker animation demo")
    ap.add_argument("--export", action="store_true", help="Export a PNG of the first frame and exit")
    ap.add_argument("--lines", type=int, default=6, help="Number of synthetic polylines")
    args = ap.parse_args()

    segment = build_scene_segment(make_polylines(args.lines), rotation_matrix_x(-math.pi / 2))

    if args.export or options.plot_preview_flag:
        fig = plot_segment(segment, elapsed_seconds=0.0, show_knots=True)
        export_plot(fig, title="curve_markers_t0", overwrite=True)
        return

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")
    plt.subplots_adjust(left=0.05, right=0.95, top=0.95, bottom=0.12)
    draw_segment(ax, segment, elapsed_seconds=0.0)

    period = 1.0 / animation.rate
    ax_time = plt.axes([0.12, 0.04, 0.78, 0.03])
    s_time = Slider(ax_time, 'elapsed (s)', 0.0, period, valinit=0.0, valstep=0.1)

    def on_change(_):
        draw_segment(ax, segment, elapsed_seconds=s_time.val)
        fig.canvas.draw_idle()

    s_time.on_changed(on_change)
    plt.show()


if __name__ == "__main__":
    main()
