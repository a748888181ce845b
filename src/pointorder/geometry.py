from __future__ import annotations

from typing import Optional

import numpy as np


def as_points(points) -> np.ndarray:
    """
    Convert an array-like of 3D points into a float (N, 3) array.

    Accepts lists of (x, y, z) tuples, numpy arrays and DataFrame values.
    The result is always a fresh copy, so callers' data is never touched.
    """
    arr = np.array(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 3), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"points must have shape (N, 3), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("points contain non-finite coordinates")
    return arr


def squared_distances(points: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Squared Euclidean distance from every row of `points` to `target`."""
    diff = points - target
    return np.einsum("ij,ij->i", diff, diff)


def nearest_index(points: np.ndarray,
                  target: np.ndarray,
                  candidates: Optional[np.ndarray] = None) -> int:
    """
    Index of the point closest to `target`.

    If `candidates` (an index array) is given, only those rows are searched and
    the returned value is still an index into `points`. The first minimum wins.
    """
    if candidates is None:
        candidates = np.arange(len(points))
    if len(candidates) == 0:
        raise ValueError("no candidate points to search")
    d2 = squared_distances(points[candidates], target)
    return int(candidates[int(np.argmin(d2))])


def path_length(points, order=None) -> float:
    """Total length of the open path visiting `points` in `order`."""
    pts = as_points(points)
    if order is not None:
        pts = pts[np.asarray(order, dtype=int)]
    if len(pts) < 2:
        return 0.0
    steps = np.diff(pts, axis=0)
    return float(np.sum(np.sqrt(np.einsum("ij,ij->i", steps, steps))))


def check_count(value, name: str) -> int:
    """
    Validate an integer count argument, clamping anything below 1 up to 1.

    Booleans, floats and non-numbers are rejected with ValueError.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return max(1, int(value))
