from __future__ import annotations

from typing import Optional, Tuple, Union

import numpy as np
import pandas as pd

from .cluster import ClusterParams, cluster_order
from .contour import contour_bins, contour_order
from .geometry import as_points, path_length
from .nearest import nearest_neighbor_order

METHODS = ("nearest", "cluster", "contour")


class PointOrdering3D:
    """
    Travel-order engine for a table of 3D points.

    Wraps a DataFrame holding one point per row and returns reordered copies of
    it. Any extra columns (ids, feed rates, labels) travel with their rows, and
    an `order` column records the visiting rank.

    Notes
    -----
    - Input dataframe must include the three coordinate columns (x, y, z by default).
    - The dataframe is copied on construction; the caller's frame is never modified.
    """

    def __init__(
        self,
        data: pd.DataFrame,
        *,
        coord_cols: Tuple[str, str, str] = ("x", "y", "z"),
        verbose: bool = False,
    ) -> None:
        self.data = data.copy()
        self.coord_cols = tuple(coord_cols)
        self.verbose = verbose

        missing = set(self.coord_cols).difference(self.data.columns)
        if missing:
            raise ValueError(f"Missing required columns: {sorted(missing)}")

        self.points = as_points(self.data[list(self.coord_cols)].to_numpy(dtype=float))
        # positional permutation behind the most recent ordering
        self.last_order: Optional[np.ndarray] = None
        # cluster or slice id per input row for the most recent ordering (None for nearest)
        self.last_labels: Optional[np.ndarray] = None

    # ---------------------------------------------------------------------
    # Orderings
    # ---------------------------------------------------------------------
    def by_nearest(self) -> pd.DataFrame:
        """Greedy nearest-neighbor chain starting at the first row."""
        return self._take(nearest_neighbor_order(self.points), None)

    def by_cluster(
        self,
        cluster_count: int,
        *,
        params: Optional[ClusterParams] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> pd.DataFrame:
        """Cluster the rows, visit clusters by proximity and chain inside each."""
        order, labels = cluster_order(self.points, cluster_count, params, rng,
                                      verbose=self.verbose, return_labels=True)
        return self._take(order, labels)

    def by_contour(self, axis: Union[str, int], slice_count: int) -> pd.DataFrame:
        """Slice the rows along `axis` and chain slice by slice."""
        order = contour_order(self.points, axis, slice_count)
        return self._take(order, contour_bins(self.points, axis, slice_count))

    def order(self, method: str, **kwargs) -> pd.DataFrame:
        """Dispatch to `by_<method>`; method is one of 'nearest', 'cluster', 'contour'."""
        method = str(method).lower()
        if method not in METHODS:
            raise ValueError(f"Unknown method {method!r}; expected one of {METHODS}")
        return getattr(self, f"by_{method}")(**kwargs)

    # ---------------------------------------------------------------------
    # Metrics
    # ---------------------------------------------------------------------
    def path_length(self, ordered: Optional[pd.DataFrame] = None) -> float:
        """Open-path length of `ordered` (or of the rows as given)."""
        if ordered is None:
            return path_length(self.points)
        return path_length(ordered[list(self.coord_cols)].to_numpy(dtype=float))

    def _take(self, order: np.ndarray, labels: Optional[np.ndarray]) -> pd.DataFrame:
        self.last_order = order
        self.last_labels = labels
        out = self.data.iloc[order].copy()
        out["order"] = np.arange(len(out), dtype=int)
        if self.verbose:
            print(f"[order] {len(out)} points  path length {self.path_length(out):.4g}")
        return out
