"""HTTP handlers for the station map data endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import geojson
from starlette.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from nyc_subway.adapters.geojson_io import records_to_feature_collection
from nyc_subway.domain.errors import (
    InvalidParameterError,
    MalformedInputError,
    StationQueryError,
)

if TYPE_CHECKING:
    from starlette.requests import Request

    from nyc_subway.domain.ports import StationQuery

logger = logging.getLogger(__name__)

GEOJSON_MEDIA_TYPE = "application/json"


def _error(message: str, status_code: int) -> Response:
    logger.info(f"Rejecting request with {status_code}: {message}")
    return PlainTextResponse(message, status_code=status_code)


class StationRoutes:
    """Serves clustered stations for a viewport, and the static subway lines."""

    def __init__(self, station_query: StationQuery, lines: Any | None = None) -> None:
        """Initialize the handlers.

        Args:
            station_query: Answers viewport queries.
            lines: Parsed subway lines GeoJSON, or None when not configured.
        """
        self.station_query = station_query
        self._lines_body = geojson.dumps(lines) if lines is not None else None

    def routes(self) -> list[Route]:
        return [
            Route("/data/subway-stations", self.subway_stations, methods=["GET"]),
            Route("/data/subway-lines", self.subway_lines, methods=["GET"]),
        ]

    async def subway_stations(self, request: Request) -> Response:
        """Return a FeatureCollection for the ``viewport`` and ``zoom`` query parameters."""
        viewport = request.query_params.get("viewport", "")
        raw_zoom = request.query_params.get("zoom", "")
        try:
            zoom = int(raw_zoom)
        except ValueError:
            return _error(f"Couldn't parse zoom: invalid integer {raw_zoom!r}", 400)

        try:
            records = await run_in_threadpool(self.station_query.query, viewport, zoom)
        except MalformedInputError as e:
            return _error(f"Couldn't parse viewport: {e}", 400)
        except InvalidParameterError as e:
            if e.parameter == "zoom":
                return _error(f"Couldn't parse zoom: {e}", 400)
            logger.error(f"Clustering failed for viewport {viewport!r}: {e}")
            return _error(f"Couldn't cluster results: {e}", 500)
        except StationQueryError as e:
            logger.error(f"Clustering failed for viewport {viewport!r}: {e}")
            return _error(f"Couldn't cluster results: {e}", 500)

        body = geojson.dumps(records_to_feature_collection(records))
        return Response(content=body, media_type=GEOJSON_MEDIA_TYPE)

    async def subway_lines(self, _request: Request) -> Response:
        """Return the subway lines GeoJSON loaded at startup."""
        if self._lines_body is None:
            return _error("Subway lines are not configured", 404)
        return Response(content=self._lines_body, media_type=GEOJSON_MEDIA_TYPE)
