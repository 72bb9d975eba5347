"""GeoJSON station dataset adapter."""

import logging
from pathlib import Path
from typing import Any

import geojson

from nyc_subway.domain.errors import StationDataError
from nyc_subway.domain.models import Station
from nyc_subway.domain.ports import StationLoader

logger = logging.getLogger(__name__)


def read_geojson(path: str | Path) -> Any:
    """Read and parse a GeoJSON file.

    Raises:
        StationDataError: If the file is missing or not valid JSON.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise StationDataError(f"GeoJSON file not found: {file_path}")
    try:
        with open(file_path, encoding="utf-8") as f:
            return geojson.load(f)
    except ValueError as e:
        raise StationDataError(f"Invalid GeoJSON in {file_path}: {e}") from e


def _optional_str(properties: dict[str, Any], key: str) -> str | None:
    # Non-string values count as missing so rendering fails instead of printing them
    value = properties.get(key)
    return value if isinstance(value, str) else None


def feature_to_station(feature: dict[str, Any], position: int) -> Station:
    """Convert a GeoJSON Point feature into a Station."""
    geometry = feature.get("geometry") or {}
    if geometry.get("type") != "Point":
        raise StationDataError(
            f"Feature #{position} must be a Point, got {geometry.get('type')!r}"
        )
    coordinates = geometry.get("coordinates") or []
    if len(coordinates) < 2:
        raise StationDataError(f"Feature #{position} has no coordinates")

    properties = dict(feature.get("properties") or {})
    return Station(
        longitude=float(coordinates[0]),
        latitude=float(coordinates[1]),
        name=_optional_str(properties, "name"),
        notes=_optional_str(properties, "notes"),
        properties=properties,
    )


class GeoJsonStationLoader(StationLoader):
    """Loads stations from a GeoJSON FeatureCollection of Point features."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Station]:
        """Load every station in file order.

        Raises:
            StationDataError: If the file cannot be read or a feature is not a point.
        """
        document = read_geojson(self.path)
        if document.get("type") != "FeatureCollection":
            raise StationDataError(f"{self.path} is not a GeoJSON FeatureCollection")

        stations = [
            feature_to_station(feature, position)
            for position, feature in enumerate(document.get("features", []))
        ]
        missing = [s for s in stations if s.name is None or s.notes is None]
        if missing:
            logger.warning(
                f"{len(missing)} station(s) in {self.path} lack a name or notes "
                "and will fail queries that render them"
            )
        logger.info(f"Read {len(stations)} station(s) from {self.path}")
        return stations
