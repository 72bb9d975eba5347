"""Web adapter for serving station map data."""

from .starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
