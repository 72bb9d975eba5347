"""Domain models for the subway station map."""

from nyc_subway.domain.models.cluster import Cluster
from nyc_subway.domain.models.clustering_policy import (
    DEFAULT_CLUSTERING_POLICY,
    ClusteringPolicy,
)
from nyc_subway.domain.models.output_record import OutputRecord, RecordKind
from nyc_subway.domain.models.rectangle import Rectangle
from nyc_subway.domain.models.station import Station

__all__ = [
    "DEFAULT_CLUSTERING_POLICY",
    "Cluster",
    "ClusteringPolicy",
    "OutputRecord",
    "RecordKind",
    "Rectangle",
    "Station",
]
