"""Domain layer - core models, errors and geo math."""

from nyc_subway.domain.errors import (
    InvalidParameterError,
    MalformedInputError,
    MissingMetadataError,
    StationDataError,
    StationQueryError,
)
from nyc_subway.domain.models import Cluster, OutputRecord, Rectangle, Station
from nyc_subway.domain.ports import SpatialIndex, StationLoader, StationQuery

__all__ = [
    "Cluster",
    "InvalidParameterError",
    "MalformedInputError",
    "MissingMetadataError",
    "OutputRecord",
    "Rectangle",
    "SpatialIndex",
    "Station",
    "StationDataError",
    "StationLoader",
    "StationQuery",
    "StationQueryError",
]
