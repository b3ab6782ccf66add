# io_modules/plotting.py

import numpy as np
import matplotlib.pyplot as plt

from core.config import MarkerSettings

marker_settings = MarkerSettings()


def _marker_size(radius: float) -> float:
    # scatter size is in points^2; map world radius to a visible dot
    return max(4.0, (radius * 200.0) ** 2)


def draw_segment(ax, segment, elapsed_seconds=None, show_knots=False):
    """
    DEBUG VIEW: draw the curve lines (tinted by curve start) and the markers of
    a SceneSegment on a 3D axis. If elapsed_seconds is given the segment is
    ticked first, otherwise the current marker positions are used.
    """
    ax.clear()

    for line in segment.lines:
        pts = line.points
        ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], '-', lw=1.0, color=line.color)
        if show_knots:
            knots = line.curve.knot_points
            ax.plot(knots[:, 0], knots[:, 1], knots[:, 2], 'o', ms=2, color=line.color, alpha=0.6)

    if elapsed_seconds is not None:
        positions = segment.tick(elapsed_seconds)
    else:
        positions = segment.positions()

    if len(positions):
        ax.scatter(positions[:, 0], positions[:, 1], positions[:, 2],
                   c=segment.colors(), s=_marker_size(getattr(segment, "marker_radius", marker_settings.radius)),
                   depthshade=False)

    title = "Curve markers"
    if elapsed_seconds is not None:
        title += f" (t = {elapsed_seconds:.2f} s)"
    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")

    _set_equal_limits(ax, segment)
    return ax


def _set_equal_limits(ax, segment):
    if not segment.lines:
        return
    allpts = np.concatenate([line.points for line in segment.lines])
    lo = allpts.min(axis=0)
    hi = allpts.max(axis=0)
    mid = (lo + hi) / 2.0
    half = max(1e-6, float((hi - lo).max()) / 2.0) * 1.05
    ax.set_xlim(mid[0] - half, mid[0] + half)
    ax.set_ylim(mid[1] - half, mid[1] + half)
    ax.set_zlim(mid[2] - half, mid[2] + half)


def plot_segment(segment, elapsed_seconds=None, show_knots=False, figsize=(8, 8)):
    """Returns: matplotlib Figure with one 3D axis."""
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection="3d")
    draw_segment(ax, segment, elapsed_seconds, show_knots)
    fig.tight_layout()
    return fig


def plot_heights(segment):
    """
    DEBUG VIEW: the vertexHeight attribute of every line against vertex index,
    with the extent bounds drawn as horizontal guides.
    Returns: matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(8, 4))
    for i, line in enumerate(segment.lines):
        ax.plot(line.vertex_height, '-', lw=1.0, color=line.color, label=f"curve {i}")
    ax.axhline(segment.extent.min, color='k', lw=0.6, ls='--')
    ax.axhline(segment.extent.max, color='k', lw=0.6, ls='--')
    ax.set_xlabel("vertex")
    if segment.lines:
        ax.set_ylabel(segment.lines[0].attribute_name)
    ax.grid(True, alpha=0.3)
    if segment.lines:
        ax.legend(loc="best", fontsize=8)
    fig.tight_layout()
    return fig
