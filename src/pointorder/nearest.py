from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .geometry import as_points, nearest_index


def nearest_neighbor_order(points, start: int = 0) -> np.ndarray:
    """
    Greedy nearest-neighbor chain over `points`, returned as an index permutation.

    The chain starts at `start` and repeatedly appends the unvisited point with
    the smallest squared distance to the current tail. Ties go to the point that
    comes first in input order. O(N^2) time, O(N) extra memory.
    """
    pts = as_points(points)
    n = len(pts)
    if n == 0:
        return np.empty(0, dtype=int)
    if not 0 <= start < n:
        raise ValueError(f"start index {start} out of range for {n} points")
    if n == 1:
        return np.zeros(1, dtype=int)

    order = np.empty(n, dtype=int)
    visited = np.zeros(n, dtype=bool)
    current = int(start)
    order[0] = current
    visited[current] = True

    for step in range(1, n):
        diff = pts - pts[current]
        d2 = np.einsum("ij,ij->i", diff, diff)
        d2[visited] = np.inf
        current = int(np.argmin(d2))
        visited[current] = True
        order[step] = current

    return order


def sort_points_by_nearest(points) -> np.ndarray:
    """Reorder points along a greedy nearest-neighbor chain from the first point."""
    pts = as_points(points)
    return pts[nearest_neighbor_order(pts)]


def chain_groups(points, groups: Iterable[np.ndarray]) -> np.ndarray:
    """
    Chain several groups of points into one visiting order.

    `groups` are index arrays into `points`, already in visiting order. Each
    group after the first starts at its member nearest to the last point of the
    previous group, then is nearest-neighbor chained. Empty groups are skipped.
    """
    pts = as_points(points)
    parts: List[np.ndarray] = []
    last = None
    for members in groups:
        members = np.asarray(members, dtype=int)
        if len(members) == 0:
            continue
        start = 0
        if last is not None:
            seed = nearest_index(pts, pts[last], members)
            start = int(np.flatnonzero(members == seed)[0])
        local = nearest_neighbor_order(pts[members], start=start)
        chained = members[local]
        parts.append(chained)
        last = int(chained[-1])

    if not parts:
        return np.empty(0, dtype=int)
    return np.concatenate(parts)
