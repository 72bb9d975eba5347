"""Ports (interfaces) for the ports-and-adapters architecture."""

from nyc_subway.domain.ports.spatial_index import SpatialIndex
from nyc_subway.domain.ports.station_loader import StationLoader
from nyc_subway.domain.ports.station_query import StationQuery

__all__ = [
    "SpatialIndex",
    "StationLoader",
    "StationQuery",
]
