"""Starlette web adapter serving the station map and its data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import Response
from starlette.routing import Route

from nyc_subway.adapters.config import AppConfig

from .rate_limit_middleware import RateLimitMiddleware
from .routes import StationRoutes
from .static_files import StaticFileServer, find_static_directory

if TYPE_CHECKING:
    from nyc_subway.domain.ports import StationQuery

logger = logging.getLogger(__name__)


class StarletteWebAdapter:
    """Builds the ASGI app and runs it under uvicorn."""

    def __init__(
        self,
        station_query: StationQuery,
        config: AppConfig,
        lines: Any | None = None,
    ) -> None:
        """Initialize the web adapter.

        Args:
            station_query: Service answering viewport queries.
            config: Application configuration.
            lines: Parsed subway lines GeoJSON, or None when not configured.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(station_query, "query", None)):
            raise TypeError("station_query must implement the StationQuery protocol")

        self.station_query = station_query
        self.config = config
        self.station_routes = StationRoutes(station_query, lines)
        self._server: Any | None = None

    def build_app(self) -> Starlette:
        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        routes = [*self.station_routes.routes(), Route("/healthz", healthz, methods=["GET"])]
        # Data routes come first so the page and asset routes never shadow them
        static_dir = find_static_directory(self.config.static_dir)
        if static_dir is not None:
            routes.extend(StaticFileServer(static_dir).routes())

        middleware = [
            Middleware(
                RateLimitMiddleware,
                requests_per_minute=self.config.rate_limit_per_minute,
            )
        ]
        return Starlette(routes=routes, middleware=middleware)

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        import uvicorn

        server_config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving station map data on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
