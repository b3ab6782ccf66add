# builders/build_modules/catmull_rom.py

"""
Centripetal Catmull-Rom curve through a list of 3D knot points.

Each span between two knots is converted to the equivalent cubic Bezier
(Hermite tangents from the non-uniform Catmull-Rom formulation) and the whole
curve is stored as a clamped cubic B-spline with triple interior knots, so
evaluation is delegated to geomdl. The global parameter t runs over [0, 1];
knot i sits at the normalised cumulative sum of |P(k+1) - P(k)| ** alpha.
"""

from typing import List, Sequence

import numpy as np
from geomdl import BSpline

from core.config import CurveSettings

curves = CurveSettings()

_PARAM_EPS = 1e-12


def knot_parameters(points: np.ndarray, alpha: float = curves.alpha) -> np.ndarray:
    """Normalised knot parameters: spacing proportional to chord length ** alpha."""
    chords = np.linalg.norm(np.diff(points, axis=0), axis=1)
    spacing = chords ** alpha
    knots = np.concatenate([[0.0], np.cumsum(spacing)])
    total = knots[-1]
    if total <= 0.0:
        raise ValueError("Knot points are coincident; cannot parameterise the curve.")
    knots = knots / total
    knots[-1] = 1.0
    return knots


def _segment_tangents(p0, p1, p2, p3, alpha, tol):
    """
    Hermite tangents (scaled to a unit local span) of the non-uniform
    Catmull-Rom segment p1 -> p2.
    """
    dt0 = np.linalg.norm(p1 - p0) ** alpha
    dt1 = np.linalg.norm(p2 - p1) ** alpha
    dt2 = np.linalg.norm(p3 - p2) ** alpha

    # zero-length neighbours would divide by zero
    if dt1 < tol:
        dt1 = 1.0
    if dt0 < tol:
        dt0 = dt1
    if dt2 < tol:
        dt2 = dt1

    m1 = (p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1
    m2 = (p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2
    return m1 * dt1, m2 * dt1


def bezier_control_points(points: np.ndarray,
                          alpha: float = curves.alpha,
                          tol: float = curves.degenerate_tolerance) -> np.ndarray:
    """
    Cubic Bezier control polygon (3 * n_segments + 1 points) equivalent to the
    open Catmull-Rom curve through `points`. The first and last segments use
    mirrored phantom points (2 * P0 - P1, 2 * Pn - Pn-1).
    """
    n = len(points)
    ctrl = [points[0]]
    for i in range(n - 1):
        p1 = points[i]
        p2 = points[i + 1]
        p0 = points[i - 1] if i > 0 else 2.0 * p1 - p2
        p3 = points[i + 2] if i + 2 < n else 2.0 * p2 - p1

        m1, m2 = _segment_tangents(p0, p1, p2, p3, alpha, tol)
        ctrl.append(p1 + m1 / 3.0)
        ctrl.append(p2 - m2 / 3.0)
        ctrl.append(p2)
    return np.array(ctrl)


def piecewise_bezier_knot_vector(knots: Sequence[float], degree: int = 3) -> List[float]:
    """Clamped knot vector with interior multiplicity `degree` (one Bezier per span)."""
    kv = [float(knots[0])] * (degree + 1)
    for k in knots[1:-1]:
        kv += [float(k)] * degree
    kv += [float(knots[-1])] * (degree + 1)
    return kv


class CatmullRomCurve:
    """
    Immutable open curve through `points` (already in world space).

    evaluate(t) works on the centripetal parameter; point_at(u) works on the
    arc-length fraction. Both are defined on [0, 1] only.
    """

    def __init__(self, points, alpha: float = curves.alpha,
                 arc_length_divisions: int = curves.arc_length_divisions):
        pts = np.array(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 3 or len(pts) < 2:
            raise ValueError("CatmullRomCurve needs an (N, 3) array with N >= 2.")
        pts.setflags(write=False)

        self._points = pts
        self._alpha = alpha
        self._knots = knot_parameters(pts, alpha)
        self._knots.setflags(write=False)

        spline = BSpline.Curve()
        spline.degree = 3
        spline.ctrlpts = bezier_control_points(pts, alpha).tolist()
        spline.knotvector = piecewise_bezier_knot_vector(self._knots, spline.degree)
        self._spline = spline

        # cumulative length table over the parameter
        divisions = max(int(arc_length_divisions), 10 * self.n_segments)
        self._table_t = np.linspace(0.0, 1.0, divisions + 1)
        table_pts = self.evaluate_many(self._table_t)
        steps = np.linalg.norm(np.diff(table_pts, axis=0), axis=1)
        self._table_len = np.concatenate([[0.0], np.cumsum(steps)])

    # -----------------------------
    # Geometry
    # -----------------------------

    @property
    def knot_points(self) -> np.ndarray:
        return self._points

    @property
    def knots(self) -> np.ndarray:
        """Parameter value at which the curve passes through each knot point."""
        return self._knots

    @property
    def n_segments(self) -> int:
        return len(self._points) - 1

    @property
    def alpha(self) -> float:
        return self._alpha

    @staticmethod
    def _check_param(t: float, name: str = "t") -> float:
        t = float(t)
        if t < -_PARAM_EPS or t > 1.0 + _PARAM_EPS:
            raise ValueError(f"{name}={t} is outside [0, 1]; the curve is open, wrap or clamp first.")
        return min(max(t, 0.0), 1.0)

    def evaluate(self, t: float) -> np.ndarray:
        t = self._check_param(t)
        return np.array(self._spline.evaluate_single(t), dtype=float)

    def evaluate_many(self, ts) -> np.ndarray:
        pts = [self._spline.evaluate_single(self._check_param(t)) for t in np.ravel(ts)]
        return np.array(pts, dtype=float).reshape(-1, 3)

    def points(self, divisions: int = curves.line_divisions) -> np.ndarray:
        """`divisions + 1` points at equal steps of the parameter."""
        return self.evaluate_many(np.linspace(0.0, 1.0, int(divisions) + 1))

    # -----------------------------
    # Arc length
    # -----------------------------

    def length(self) -> float:
        return float(self._table_len[-1])

    def length_at(self, t: float) -> float:
        """Cumulative arc length from the start to parameter t."""
        t = self._check_param(t)
        return float(np.interp(t, self._table_t, self._table_len))

    def t_at_fraction(self, u: float) -> float:
        """Invert the length table: parameter at which fraction u of the length is covered."""
        u = self._check_param(u, "u")
        target = u * self._table_len[-1]
        i = int(np.searchsorted(self._table_len, target, side="left"))
        if i <= 0:
            return 0.0
        if i >= len(self._table_len):
            return 1.0
        l0, l1 = self._table_len[i - 1], self._table_len[i]
        seg = l1 - l0
        frac = 0.0 if seg == 0 else (target - l0) / seg
        t0, t1 = self._table_t[i - 1], self._table_t[i]
        return float(t0 + frac * (t1 - t0))

    def point_at(self, u: float) -> np.ndarray:
        """Point at arc-length fraction u."""
        return self.evaluate(self.t_at_fraction(u))

    def spaced_points(self, count: int, include_end: bool = False) -> np.ndarray:
        """
        `count` points at equal arc-length steps. With include_end=False the
        fractions are i / count (end excluded), otherwise i / (count - 1).
        """
        count = int(count)
        if count <= 0:
            return np.empty((0, 3))
        if include_end and count > 1:
            fractions = np.arange(count) / (count - 1)
        else:
            fractions = np.arange(count) / count
        return self.evaluate_many([self.t_at_fraction(u) for u in fractions])

    def __repr__(self):
        return (f"CatmullRomCurve(n_points={len(self._points)}, alpha={self._alpha}, "
                f"length={self.length():.4g})")
