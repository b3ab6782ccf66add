# builders/build_modules/transform_helpers.py

import math
import numpy as np


def identity_matrix() -> np.ndarray:
    return np.eye(4)


def rotation_matrix_x(angle: float) -> np.ndarray:
    """Right-handed rotation about the X axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0,   c,  -s, 0.0],
        [0.0,   s,   c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def translation_matrix(dx: float, dy: float, dz: float) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = (dx, dy, dz)
    return m


def compose(*matrices) -> np.ndarray:
    """
    Compose 4x4 transforms left to right: compose(A, B) applies B first, then A,
    the same order as the matrix product A @ B.
    """
    out = np.eye(4)
    for m in matrices:
        out = out @ as_matrix4(m)
    return out


def as_matrix4(matrix) -> np.ndarray:
    """Return `matrix` as a float (4, 4) array; a flat 16-sequence is read row-major."""
    if matrix is None:
        return np.eye(4)
    m = np.asarray(matrix, dtype=float)
    if m.shape == (16,):
        m = m.reshape(4, 4)
    if m.shape != (4, 4):
        raise ValueError(f"World transform must be a 4x4 matrix, got shape {m.shape}.")
    if not np.all(np.isfinite(m)):
        raise ValueError("World transform contains non-finite values.")
    return m


def as_points3(points) -> np.ndarray:
    """
    Accept a flat [x0, y0, z0, x1, ...] buffer or an (N, 3) sequence and
    return an (N, 3) float array.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 1:
        if pts.size % 3 != 0:
            raise ValueError(f"Flat point buffer length must be a multiple of 3, got {pts.size}.")
        pts = pts.reshape(-1, 3)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError(f"Points must be 3D, got array of shape {pts.shape}.")
    if not np.all(np.isfinite(pts)):
        raise ValueError("Point buffer contains non-finite values.")
    return pts


def apply_matrix4(points, matrix) -> np.ndarray:
    """Transform (N, 3) points by a 4x4 matrix, dividing through by w."""
    pts = as_points3(points)
    m = as_matrix4(matrix)
    homo = np.hstack([pts, np.ones((len(pts), 1))]) @ m.T
    w = homo[:, 3:4]
    if np.any(w == 0.0):
        raise ValueError("World transform maps a point to infinity (w == 0).")
    return homo[:, :3] / w


def dedupe_consecutive(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """Drop points that repeat their predecessor (within `tol`)."""
    if len(points) < 2:
        return points
    step = np.linalg.norm(np.diff(points, axis=0), axis=1)
    keep = np.concatenate([[True], step > tol])
    return points[keep]
