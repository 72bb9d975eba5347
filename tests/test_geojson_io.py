"""Tests for the GeoJSON station loader and FeatureCollection encoder."""

import json
from pathlib import Path

import pytest

from nyc_subway.adapters.geojson_io import (
    GeoJsonStationLoader,
    read_geojson,
    record_to_feature,
    records_to_feature_collection,
)
from nyc_subway.domain.errors import StationDataError
from nyc_subway.domain.models import OutputRecord

BUNDLED_STATIONS = Path(__file__).parent.parent / "data" / "subway-stations.geojson"


def _write_collection(path: Path, features: list[dict]) -> Path:
    path.write_text(json.dumps({"type": "FeatureCollection", "features": features}))
    return path


def _point_feature(lng: float, lat: float, **properties: object) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lng, lat]},
        "properties": properties,
    }


class TestGeoJsonStationLoader:
    """Tests for reading stations from GeoJSON."""

    def test_loads_points_in_file_order(self, tmp_path: Path) -> None:
        """Given a FeatureCollection of points, when loading, then stations keep file order."""
        path = _write_collection(
            tmp_path / "stations.geojson",
            [
                _point_feature(-73.99, 40.73, name="Astor Pl", notes="6-all times", line="6"),
                _point_feature(-74.0, 40.71, name="Canal St", notes="6-all times"),
            ],
        )

        stations = GeoJsonStationLoader(path).load()

        assert [s.name for s in stations] == ["Astor Pl", "Canal St"]
        assert stations[0].coordinates == (-73.99, 40.73)
        assert stations[0].notes == "6-all times"
        assert stations[0].properties["line"] == "6"

    def test_missing_metadata_is_loaded_as_none(self, tmp_path: Path) -> None:
        """Given a feature without notes, when loading, then the station's notes are None."""
        path = _write_collection(tmp_path / "s.geojson", [_point_feature(0.0, 0.0, name="X")])

        stations = GeoJsonStationLoader(path).load()

        assert stations[0].name == "X"
        assert stations[0].notes is None

    def test_non_string_metadata_is_loaded_as_none(self, tmp_path: Path) -> None:
        """Given a dict name and numeric notes, when loading, then both are treated as missing."""
        path = _write_collection(
            tmp_path / "s.geojson",
            [_point_feature(-73.99, 40.73, name={"en": "Astor"}, notes=5)],
        )

        stations = GeoJsonStationLoader(path).load()

        assert stations[0].name is None
        assert stations[0].notes is None
        assert stations[0].properties["notes"] == 5

    def test_non_point_feature_is_rejected(self, tmp_path: Path) -> None:
        """Given a LineString feature, when loading, then StationDataError names the feature."""
        line = {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            "properties": {},
        }
        path = _write_collection(tmp_path / "s.geojson", [_point_feature(0.0, 0.0), line])

        with pytest.raises(StationDataError, match="Feature #1 must be a Point"):
            GeoJsonStationLoader(path).load()

    def test_non_collection_is_rejected(self, tmp_path: Path) -> None:
        """Given a bare Feature document, when loading, then StationDataError is raised."""
        path = tmp_path / "s.geojson"
        path.write_text(json.dumps(_point_feature(0.0, 0.0)))

        with pytest.raises(StationDataError, match="not a GeoJSON FeatureCollection"):
            GeoJsonStationLoader(path).load()

    def test_missing_file_is_rejected(self, tmp_path: Path) -> None:
        """Given a missing file, when loading, then StationDataError is raised."""
        with pytest.raises(StationDataError, match="not found"):
            GeoJsonStationLoader(tmp_path / "missing.geojson").load()

    def test_invalid_json_is_rejected(self, tmp_path: Path) -> None:
        """Given a file that is not JSON, when reading, then StationDataError is raised."""
        path = tmp_path / "broken.geojson"
        path.write_text("{not json")

        with pytest.raises(StationDataError, match="Invalid GeoJSON"):
            read_geojson(path)

    def test_bundled_dataset_loads(self) -> None:
        """Given the bundled dataset, when loading, then every station has name and notes."""
        stations = GeoJsonStationLoader(BUNDLED_STATIONS).load()

        assert len(stations) == 24
        assert all(s.name and s.notes is not None for s in stations)


class TestFeatureEncoder:
    """Tests for encoding output records as GeoJSON."""

    def test_station_record_keeps_original_properties(self) -> None:
        """Given a station record, when encoding, then original properties are kept and tagged."""
        record = OutputRecord(
            kind="station",
            longitude=-73.99,
            latitude=40.73,
            title="Astor Pl Station",
            description="6-all times",
            properties={"name": "Astor Pl", "line": "6"},
        )

        feature = record_to_feature(record)

        assert feature["geometry"]["type"] == "Point"
        assert list(feature["geometry"]["coordinates"]) == [-73.99, 40.73]
        assert feature["properties"] == {
            "name": "Astor Pl",
            "line": "6",
            "title": "Astor Pl Station",
            "description": "6-all times",
            "type": "station",
        }

    def test_cluster_record_is_tagged_as_cluster(self) -> None:
        """Given a cluster record, when encoding, then the type property is 'cluster'."""
        record = OutputRecord(
            kind="cluster",
            longitude=1.5,
            latitude=2.5,
            title="Station Cluster #1",
            description="Contains 3 stations",
        )

        feature = record_to_feature(record)

        assert feature["properties"]["type"] == "cluster"
        assert feature["properties"]["title"] == "Station Cluster #1"

    def test_feature_collection_keeps_record_order(self) -> None:
        """Given several records, when encoding, then the collection lists them in order."""
        records = [
            OutputRecord(kind="station", longitude=0, latitude=0, title="A", description=""),
            OutputRecord(kind="cluster", longitude=1, latitude=1, title="B", description=""),
        ]

        collection = json.loads(json.dumps(records_to_feature_collection(records)))

        assert collection["type"] == "FeatureCollection"
        assert [f["properties"]["title"] for f in collection["features"]] == ["A", "B"]
