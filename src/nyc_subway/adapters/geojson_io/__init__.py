"""GeoJSON adapters for the station dataset and query responses."""

from nyc_subway.adapters.geojson_io.feature_encoder import (
    record_to_feature,
    records_to_feature_collection,
)
from nyc_subway.adapters.geojson_io.station_loader import GeoJsonStationLoader, read_geojson

__all__ = [
    "GeoJsonStationLoader",
    "read_geojson",
    "record_to_feature",
    "records_to_feature_collection",
]
