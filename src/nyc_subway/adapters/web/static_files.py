"""Static file server for the browser map."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

CACHE_CONTROL = b"public, max-age=60, must-revalidate"


def find_static_directory(configured: str | None = None) -> Path | None:
    """Locate the directory holding the map page.

    A configured directory is used as is. Otherwise ``static/`` is looked up in the
    working directory (deployments) and next to the source tree (development).
    """
    if configured:
        candidates = [Path(configured)]
    else:
        candidates = [
            Path.cwd() / "static",
            Path(__file__).parent.parent.parent.parent.parent / "static",
        ]

    for path in candidates:
        if path.is_dir():
            return path

    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: Any) -> None:
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(name.lower() == b"cache-control" for name, _ in headers):
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class StaticFileServer:
    """Serves the map page at ``/`` and its assets under ``/static``."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def routes(self) -> list[BaseRoute]:
        cached_static = StaticFileCacheApp(StaticFiles(directory=str(self.directory)))
        logger.info(f"Serving map assets from {self.directory} with 1-minute cache headers")
        return [
            Route("/", self.index, methods=["GET"]),
            Mount("/static", app=cached_static, name="static"),
        ]

    async def index(self, _request: Any) -> Response:
        """Serve the map page."""
        page = self.directory / "index.html"
        if not page.is_file():
            logger.error(f"Map page not found at {page}")
            return PlainTextResponse("Map page not found", status_code=404)
        return FileResponse(str(page), media_type="text/html")
