"""Application services (use cases) for the station map."""

from .clustering import cluster_points, select_parameters
from .result_assembler import assemble_records
from .station_query_service import StationQueryService
from .viewport_resolver import parse_viewport

__all__ = [
    "StationQueryService",
    "assemble_records",
    "cluster_points",
    "parse_viewport",
    "select_parameters",
]
