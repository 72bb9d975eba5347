"""Spatial index port."""

from collections.abc import Sequence
from typing import Protocol

from nyc_subway.domain.models.rectangle import Rectangle
from nyc_subway.domain.models.station import Station


class SpatialIndex(Protocol):
    """Port for a build-once, read-many index over station points.

    Handles returned by ``query_intersect`` are positions in the sequence that
    was passed to ``load``.
    """

    def load(self, stations: Sequence[Station]) -> None:
        """Bulk-load all stations. May be called exactly once."""
        ...

    def query_intersect(self, rect: Rectangle) -> list[int]:
        """Return handles of stations whose entry intersects rect."""
        ...

    def station(self, handle: int) -> Station:
        """Return the station stored under a handle."""
        ...

    def __len__(self) -> int:
        """Return the number of loaded stations."""
        ...
