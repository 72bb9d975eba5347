"""Encode output records as a GeoJSON FeatureCollection."""

from collections.abc import Iterable

import geojson

from nyc_subway.domain.models import OutputRecord

# geojson rounds coordinates to 6 digits by default; station points pass through as loaded.
COORDINATE_PRECISION = 15


def record_to_feature(record: OutputRecord) -> geojson.Feature:
    """Build a Point feature; the record kind is stored in the ``type`` property."""
    properties = dict(record.properties)
    properties.update(
        title=record.title,
        description=record.description,
        type=record.kind,
    )
    return geojson.Feature(
        geometry=geojson.Point(
            (record.longitude, record.latitude), precision=COORDINATE_PRECISION
        ),
        properties=properties,
    )


def records_to_feature_collection(records: Iterable[OutputRecord]) -> geojson.FeatureCollection:
    return geojson.FeatureCollection([record_to_feature(record) for record in records])
