"""Configuration adapters."""

from nyc_subway.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
