"""Spatial index adapters."""

from nyc_subway.adapters.spatial.strtree_index import StrTreeSpatialIndex

__all__ = ["StrTreeSpatialIndex"]
