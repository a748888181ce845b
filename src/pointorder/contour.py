from __future__ import annotations

from typing import Union

import numpy as np

from .geometry import as_points, check_count
from .nearest import chain_groups

AXES = {"x": 0, "y": 1, "z": 2}


def axis_index(axis: Union[str, int]) -> int:
    """Map 'x'/'y'/'z' (any case) or 0/1/2 to a column index."""
    if isinstance(axis, str):
        key = axis.strip().lower()
        if key in AXES:
            return AXES[key]
    elif isinstance(axis, (int, np.integer)) and not isinstance(axis, bool) and 0 <= axis <= 2:
        return int(axis)
    raise ValueError(f"axis must be one of 'x', 'y', 'z' (or 0, 1, 2), got {axis!r}")


def contour_bins(points, axis: Union[str, int], slice_count: int) -> np.ndarray:
    """
    Bin index per point along `axis`, in [0, slice_count].

    There are slice_count + 1 bins: points at the maximum fall into the extra
    top bin. When all points share the same axis value every point is in bin 0.
    A slice_count below 1 is treated as 1.
    """
    slice_count = check_count(slice_count, "slice_count")
    col = axis_index(axis)
    pts = as_points(points)
    if len(pts) == 0:
        return np.empty(0, dtype=int)

    vals = pts[:, col]
    v_min, v_max = float(vals.min()), float(vals.max())
    # halve everything when the span would overflow; exact for normal floats
    scale = 0.5 if v_max / 2 - v_min / 2 > np.finfo(float).max / 2 else 1.0
    vals, v_min, v_max = vals * scale, v_min * scale, v_max * scale
    width = (v_max - v_min) / slice_count
    if width <= 0:
        return np.zeros(len(pts), dtype=int)
    bins = np.floor((vals - v_min) / width).astype(int)
    return np.clip(bins, 0, slice_count)


def contour_order(points, axis: Union[str, int], slice_count: int) -> np.ndarray:
    """Index permutation: slices visited in ascending axis order, chained inside each."""
    pts = as_points(points)
    bins = contour_bins(pts, axis, slice_count)
    if len(pts) == 0:
        return np.empty(0, dtype=int)
    groups = [np.flatnonzero(bins == b) for b in range(int(bins.max()) + 1)]
    return chain_groups(pts, groups)


def sort_points_by_contour(points, axis: Union[str, int], slice_count: int) -> np.ndarray:
    """Reorder points slice by slice along `axis`."""
    pts = as_points(points)
    return pts[contour_order(pts, axis, slice_count)]
