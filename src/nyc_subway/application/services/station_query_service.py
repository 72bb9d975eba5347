"""Viewport query use case."""

import logging
from typing import TYPE_CHECKING

from nyc_subway.domain.models import DEFAULT_CLUSTERING_POLICY, Cluster, ClusteringPolicy

from .clustering import cluster_points, select_parameters
from .result_assembler import assemble_records
from .viewport_resolver import parse_viewport

if TYPE_CHECKING:
    from nyc_subway.domain.models import OutputRecord
    from nyc_subway.domain.ports import SpatialIndex

logger = logging.getLogger(__name__)


class StationQueryService:
    """Answers viewport queries against a loaded spatial index.

    The index is only read, so one service can serve concurrent requests.
    """

    def __init__(
        self,
        index: "SpatialIndex",
        policy: ClusteringPolicy = DEFAULT_CLUSTERING_POLICY,
    ) -> None:
        """Initialize with a loaded index and the clustering policy to apply."""
        self._index = index
        self._policy = policy

    def query(self, viewport: str, zoom: int) -> list["OutputRecord"]:
        """Return station and cluster records for a viewport at a zoom level.

        Raises:
            MalformedInputError: If the viewport cannot be parsed.
            InvalidParameterError: If the zoom level is negative.
            MissingMetadataError: If a station to render lacks a name or notes.
        """
        rect = parse_viewport(viewport)
        radius, min_size = select_parameters(zoom, self._policy)

        handles = self._index.query_intersect(rect)
        stations = [self._index.station(handle) for handle in handles]
        clusters, noise = cluster_points(stations, radius, min_size)
        logger.debug(
            f"Viewport {viewport!r} at zoom {zoom}: {len(handles)} candidate(s), "
            f"{len(clusters)} cluster(s), {len(noise)} single station(s)"
        )

        # Positions in the candidate list back to dataset handles
        noise_handles = [handles[position] for position in noise]
        dataset_clusters = [
            Cluster(
                members=tuple(handles[position] for position in cluster.members),
                centroid=cluster.centroid,
            )
            for cluster in clusters
        ]
        return assemble_records(dataset_clusters, noise_handles, self._index.station)
