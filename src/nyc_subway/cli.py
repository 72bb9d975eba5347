"""CLI for running a single viewport query against the bundled dataset."""

import argparse
import sys

import geojson

from nyc_subway.adapters.config import AppConfig
from nyc_subway.adapters.geojson_io import records_to_feature_collection
from nyc_subway.domain.errors import StationDataError, StationQueryError
from nyc_subway.main import build_query_service, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query clustered subway stations for a map viewport",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Lower Manhattan at zoom 12
  nyc-subway-query "40.70,-74.02|40.75,-73.96" 12

  # Use another dataset and pretty-print
  nyc-subway-query "40.70,-74.02|40.75,-73.96" 15 --stations my-stations.geojson --indent 2
        """,
    )
    parser.add_argument("viewport", help="Viewport as 'swLat,swLng|neLat,neLng'")
    parser.add_argument("zoom", type=int, help="Map zoom level")
    parser.add_argument("--stations", help="GeoJSON station dataset (defaults to STATIONS_FILE)")
    parser.add_argument("--config", help="TOML file with [clustering] overrides")
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    parser.add_argument("--verbose", action="store_true", help="Log clustering details")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one query and print the resulting FeatureCollection to stdout."""
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    overrides = {}
    if args.stations:
        overrides["stations_file"] = args.stations
    if args.config:
        overrides["config_file"] = args.config

    try:
        config = AppConfig(**overrides)
        service = build_query_service(config)
    except (StationDataError, FileNotFoundError, ValueError) as e:
        print(f"Error: could not load stations: {e}", file=sys.stderr)
        return 1

    try:
        records = service.query(args.viewport, args.zoom)
    except StationQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(geojson.dumps(records_to_feature_collection(records), indent=args.indent))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
