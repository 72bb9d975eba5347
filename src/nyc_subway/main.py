"""Main entry point for the subway station map server."""

import asyncio
import logging
import sys
from typing import Any

from nyc_subway.adapters.config import AppConfig
from nyc_subway.adapters.geojson_io import GeoJsonStationLoader, read_geojson
from nyc_subway.adapters.spatial import StrTreeSpatialIndex
from nyc_subway.adapters.web import StarletteWebAdapter
from nyc_subway.application.services import StationQueryService
from nyc_subway.domain.errors import StationDataError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_query_service(config: AppConfig) -> StationQueryService:
    """Load the station dataset into a fresh index and wrap it in a query service.

    Raises:
        StationDataError: If the station dataset cannot be loaded.
        ValueError: If the clustering configuration is invalid.
    """
    stations = GeoJsonStationLoader(config.stations_file).load()
    index = StrTreeSpatialIndex()
    index.load(stations)
    return StationQueryService(index, config.get_clustering_policy())


def load_lines(config: AppConfig) -> Any | None:
    """Load the optional subway lines GeoJSON."""
    if not config.lines_file:
        return None
    try:
        return read_geojson(config.lines_file)
    except StationDataError as e:
        logger.warning(f"Subway lines unavailable: {e}")
        return None


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    # Serving requires a fully loaded index
    try:
        query_service = build_query_service(config)
    except (StationDataError, FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load stations: {e}")
        sys.exit(1)

    web_adapter = StarletteWebAdapter(query_service, config, lines=load_lines(config))
    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
