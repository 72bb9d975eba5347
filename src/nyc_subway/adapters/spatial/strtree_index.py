"""Spatial index adapter backed by shapely's bulk-loaded STRtree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from shapely import STRtree, box

from nyc_subway.domain.models import Rectangle, Station
from nyc_subway.domain.ports import SpatialIndex

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Stations are points; the tree stores them as tiny boxes.
STATION_BOUNDS_EPSILON = 1e-6


class StrTreeSpatialIndex(SpatialIndex):
    """Static R-tree over station entries.

    Built once with ``load``; afterwards it is read-only and safe to query
    from concurrent requests.
    """

    def __init__(self, epsilon: float = STATION_BOUNDS_EPSILON) -> None:
        self._epsilon = epsilon
        self._stations: list[Station] = []
        self._tree: STRtree | None = None

    def load(self, stations: Sequence[Station]) -> None:
        """Bulk-load all stations.

        Raises:
            RuntimeError: If the index has already been loaded.
        """
        if self._tree is not None:
            raise RuntimeError("Spatial index is already loaded")

        self._stations = list(stations)
        entries = [
            box(*Rectangle.around_point(s.longitude, s.latitude, self._epsilon).bounds)
            for s in self._stations
        ]
        self._tree = STRtree(entries)
        logger.info(f"Loaded {len(self._stations)} station(s) into the spatial index")

    def query_intersect(self, rect: Rectangle) -> list[int]:
        """Return handles of stations whose entry intersects rect, in dataset order."""
        if self._tree is None:
            raise RuntimeError("Spatial index has not been loaded")
        if not rect.is_well_formed():
            logger.warning(f"Ignoring query with malformed rectangle {rect}")
            return []

        hits = self._tree.query(box(*rect.bounds))
        return [int(handle) for handle in np.sort(hits)]

    def station(self, handle: int) -> Station:
        return self._stations[handle]

    def __len__(self) -> int:
        return len(self._stations)
