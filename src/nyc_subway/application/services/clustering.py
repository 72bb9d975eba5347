"""Zoom-dependent density clustering of stations."""

import logging
from collections.abc import Sequence

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components
from scipy.spatial import cKDTree

from nyc_subway.domain.errors import InvalidParameterError
from nyc_subway.domain.geo import ground_resolution
from nyc_subway.domain.models import DEFAULT_CLUSTERING_POLICY, Cluster, ClusteringPolicy, Station

logger = logging.getLogger(__name__)


def select_parameters(
    zoom: int, policy: ClusteringPolicy = DEFAULT_CLUSTERING_POLICY
) -> tuple[float, int]:
    """Return the clustering radius and minimum cluster size for a zoom level.

    At the highest zoom levels stations closer than ``policy.ungrouped_radius``
    are treated as the same place and groups of two are allowed. Below that,
    the radius is the ground distance covered by one station marker at the
    reference latitude, and groups need at least three stations.

    The radius is not clamped, so at very low zoom levels distant stations can
    end up in one cluster.
    """
    if zoom < 0:
        raise InvalidParameterError("zoom", zoom, "must be a non-negative integer")

    if zoom >= policy.min_zoom_level_to_show_ungrouped_stations:
        return policy.ungrouped_radius, policy.ungrouped_min_cluster_size

    resolution = ground_resolution(policy.reference_latitude, zoom)
    return resolution * policy.station_marker_width_px, policy.grouped_min_cluster_size


def cluster_points(
    points: Sequence[Station], radius: float, min_size: int
) -> tuple[list[Cluster], list[int]]:
    """Partition stations into clusters and noise.

    Two stations are reachable when their Euclidean distance (in coordinate
    units) is at most ``radius``. Every connected group of reachable stations
    with at least ``min_size`` members becomes a cluster; stations in smaller
    groups are noise. The assignment does not depend on the order of points.

    Args:
        points: Stations to cluster.
        radius: Reachability distance, >= 0.
        min_size: Minimum number of members for a cluster, >= 1.

    Returns:
        Clusters ordered by their first member, and noise positions in
        ascending order. Cluster members and noise entries are positions in
        ``points``.
    """
    if not radius >= 0:
        raise InvalidParameterError("radius", radius, "must be a non-negative number")
    if min_size < 1:
        raise InvalidParameterError("min_size", min_size, "must be at least 1")

    if not points:
        return [], []

    coords = np.array([p.coordinates for p in points], dtype=float)
    count = len(coords)

    pairs = cKDTree(coords).query_pairs(r=radius, output_type="ndarray").reshape(-1, 2)
    adjacency = coo_matrix(
        (np.ones(len(pairs), dtype=np.int8), (pairs[:, 0], pairs[:, 1])),
        shape=(count, count),
    )
    _, labels = connected_components(adjacency, directed=False)

    # Insertion order follows the first (lowest) position of each component.
    groups: dict[int, list[int]] = {}
    for position, label in enumerate(labels):
        groups.setdefault(int(label), []).append(position)

    clusters: list[Cluster] = []
    noise: list[int] = []
    for members in groups.values():
        if len(members) < min_size:
            noise.extend(members)
            continue
        lng, lat = coords[members].mean(axis=0)
        clusters.append(Cluster(members=tuple(members), centroid=(float(lng), float(lat))))

    noise.sort()
    logger.debug(
        f"Clustered {count} point(s) with radius={radius} min_size={min_size}: "
        f"{len(clusters)} cluster(s), {len(noise)} noise"
    )
    return clusters, noise
