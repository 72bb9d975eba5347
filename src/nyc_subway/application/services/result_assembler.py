"""Turn clustering output into renderable records."""

from collections.abc import Callable, Sequence

from nyc_subway.domain.errors import MissingMetadataError
from nyc_subway.domain.models import Cluster, OutputRecord, Station


def _station_record(handle: int, station: Station) -> OutputRecord:
    if station.name is None:
        raise MissingMetadataError(handle, "name")
    if station.notes is None:
        raise MissingMetadataError(handle, "notes")
    return OutputRecord(
        kind="station",
        longitude=station.longitude,
        latitude=station.latitude,
        title=f"{station.name} Station",
        description=station.notes,
        properties=dict(station.properties),
    )


def _cluster_record(ordinal: int, cluster: Cluster) -> OutputRecord:
    lng, lat = cluster.centroid
    return OutputRecord(
        kind="cluster",
        longitude=lng,
        latitude=lat,
        title=f"Station Cluster #{ordinal}",
        description=f"Contains {cluster.count} stations",
    )


def assemble_records(
    clusters: Sequence[Cluster],
    noise: Sequence[int],
    station_for: Callable[[int], Station],
) -> list[OutputRecord]:
    """Build station records for noise, followed by one record per cluster.

    Args:
        clusters: Clusters in clustering order; ordinals are 1-based positions.
        noise: Handles of stations that are not part of any cluster.
        station_for: Looks up the station for a handle.

    Raises:
        MissingMetadataError: If a noise station has no name or notes.
    """
    records = [_station_record(handle, station_for(handle)) for handle in noise]
    records.extend(
        _cluster_record(ordinal, cluster) for ordinal, cluster in enumerate(clusters, start=1)
    )
    return records
