from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from .geometry import as_points, check_count, squared_distances
from .nearest import chain_groups, nearest_neighbor_order


@dataclass(frozen=True)
class ClusterParams:
    """Parameters for the Lloyd iterations used by cluster ordering."""
    max_iters: int = 8
    convergence_thr_sq: float = 0.1  # absolute, in squared coordinate units
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_iters < 1:
            raise ValueError("max_iters must be >= 1")
        if self.convergence_thr_sq < 0:
            raise ValueError("convergence_thr_sq must be >= 0")


def kmeans_partition(
    points,
    cluster_count: int,
    params: Optional[ClusterParams] = None,
    rng: Optional[np.random.Generator] = None,
    *,
    verbose: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Partition points with a few rounds of Lloyd's algorithm.

    Initial centroids are sampled uniformly (with replacement) from the points.
    A centroid is only replaced when its cluster mean moved by more than
    `params.convergence_thr_sq` (squared distance); iterations stop once no
    centroid moves that far, or after `params.max_iters` rounds.

    Returns
    -------
    labels : (N,) int array
        Cluster id per point, re-indexed to 0..m-1 over non-empty clusters.
    centroids : (m, 3) float array
        Centroid per surviving cluster, m <= min(N, cluster_count).
    """
    cluster_count = check_count(cluster_count, "cluster_count")
    params = params or ClusterParams()
    pts = as_points(points)
    n = len(pts)
    if n == 0:
        return np.empty(0, dtype=int), np.empty((0, 3), dtype=float)
    if rng is None:
        rng = np.random.default_rng(params.seed)

    k = min(n, cluster_count)
    centroids = pts[rng.integers(0, n, size=k)].copy()
    labels = np.zeros(n, dtype=int)

    it = 0
    for it in range(1, params.max_iters + 1):
        # argmin keeps the lowest cluster index on ties
        labels = np.argmin(cdist(pts, centroids, metric="sqeuclidean"), axis=1)

        changed = False
        for i in range(k):
            members = pts[labels == i]
            if len(members) == 0:
                continue
            mean = members.mean(axis=0)
            if squared_distances(mean[None, :], centroids[i])[0] > params.convergence_thr_sq:
                centroids[i] = mean
                changed = True
        if not changed:
            break

    if verbose:
        print(f"[cluster] k={k}  iterations={it}  (max_iters={params.max_iters})")

    used = np.unique(labels)
    remap = np.full(k, -1, dtype=int)
    remap[used] = np.arange(len(used))
    return remap[labels], centroids[used]


def order_clusters(centroids) -> np.ndarray:
    """
    Visiting order over cluster centroids.

    Starts with the centroid nearest to the origin, then chains greedily to the
    nearest unvisited centroid.
    """
    c = as_points(centroids)
    if len(c) == 0:
        return np.empty(0, dtype=int)
    first = int(np.argmin(squared_distances(c, np.zeros(3))))
    return nearest_neighbor_order(c, start=first)


def cluster_order(
    points,
    cluster_count: int,
    params: Optional[ClusterParams] = None,
    rng: Optional[np.random.Generator] = None,
    *,
    verbose: bool = False,
    return_labels: bool = False,
):
    """
    Index permutation: clusters visited by proximity, chained inside each.

    With `return_labels=True` returns `(order, labels)`, labels being the cluster
    id of every input point.
    """
    pts = as_points(points)
    labels, centroids = kmeans_partition(pts, cluster_count, params, rng, verbose=verbose)
    groups = [np.flatnonzero(labels == c) for c in order_clusters(centroids)]
    order = chain_groups(pts, groups)
    if return_labels:
        return order, labels
    return order


def sort_points_by_cluster(
    points,
    cluster_count: int,
    params: Optional[ClusterParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Reorder points cluster by cluster (see `cluster_order`)."""
    pts = as_points(points)
    return pts[cluster_order(pts, cluster_count, params, rng)]
