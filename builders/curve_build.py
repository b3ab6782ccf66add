# builders/curve_build.py

from typing import Iterable, List

from core.errors import InsufficientPointsError
from core.config import CurveSettings

from builders.build_modules.catmull_rom import CatmullRomCurve
from builders.build_modules.transform_helpers import (
    apply_matrix4,
    as_points3,
    dedupe_consecutive,
)

curves = CurveSettings()


def build(points, world_transform=None) -> CatmullRomCurve:
    """
    Build a centripetal Catmull-Rom curve from a polyline.

    Args:
        points: flat [x0, y0, z0, x1, ...] buffer or (N, 3) sequence, in object space.
        world_transform: 4x4 matrix (or flat row-major 16-sequence) taking the
            points to world space. None means identity.

    Returns:
        CatmullRomCurve: open curve through every (de-duplicated) point, in order.

    Raises:
        InsufficientPointsError: fewer than `curves.min_points` distinct points.
    """
    pts = as_points3(points)
    if len(pts) < curves.min_points:
        raise InsufficientPointsError(len(pts), curves.min_points)

    world = apply_matrix4(pts, world_transform)

    # chord ** 0.5 below the tolerance counts as a repeated point
    world = dedupe_consecutive(world, tol=curves.degenerate_tolerance ** 2)
    if len(world) < curves.min_points:
        raise InsufficientPointsError(len(world), curves.min_points)

    return CatmullRomCurve(world,
                           alpha=curves.alpha,
                           arc_length_divisions=curves.arc_length_divisions)


def build_curves(polylines: Iterable, world_transform=None) -> List[CatmullRomCurve]:
    """Build one curve per polyline; the first malformed polyline aborts the batch."""
    return [build(points, world_transform) for points in polylines]
