"""Clustered NYC subway stations for map viewports."""

__version__ = "0.1.0"
