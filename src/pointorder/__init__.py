"""pointorder: heuristic travel ordering for 3D point sets.

Public API:
- sort_points_by_nearest: greedy nearest-neighbor chain from the first point
- sort_points_by_cluster: Lloyd clustering, clusters visited by proximity, chained inside
- sort_points_by_contour: axis-aligned slices visited bottom-up, chained inside
- PointOrdering3D: the same orderings over a pandas DataFrame of x, y, z rows
"""

from .cluster import ClusterParams, cluster_order, sort_points_by_cluster
from .contour import contour_order, sort_points_by_contour
from .geometry import path_length
from .nearest import nearest_neighbor_order, sort_points_by_nearest
from .ordering import PointOrdering3D

__all__ = [
    "sort_points_by_nearest", "sort_points_by_cluster", "sort_points_by_contour",
    "nearest_neighbor_order", "cluster_order", "contour_order",
    "ClusterParams", "PointOrdering3D", "path_length",
]
