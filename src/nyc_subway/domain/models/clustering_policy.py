"""Clustering policy domain model."""

from pydantic import BaseModel, ConfigDict, Field

from nyc_subway.domain.geo import NYC_LATITUDE


class ClusteringPolicy(BaseModel):
    """Zoom-dependent clustering thresholds.

    The defaults come from production tuning of the NYC subway map and should
    only be overridden deliberately.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_zoom_level_to_show_ungrouped_stations: int = Field(
        default=14, ge=0, description="Zoom level at which stations stop being grouped"
    )
    ungrouped_radius: float = Field(
        default=0.01,
        ge=0,
        description="Radius within which stations count as the same place at high zoom",
    )
    ungrouped_min_cluster_size: int = Field(
        default=2, ge=1, description="Minimum cluster size at high zoom"
    )
    grouped_min_cluster_size: int = Field(
        default=3, ge=1, description="Minimum cluster size below the ungrouped zoom level"
    )
    station_marker_width_px: float = Field(
        default=28, gt=0, description="Width of the station marker image in pixels"
    )
    reference_latitude: float = Field(
        default=NYC_LATITUDE,
        ge=-90,
        le=90,
        description="Latitude used to estimate the ground size of a pixel",
    )


DEFAULT_CLUSTERING_POLICY = ClusteringPolicy()
