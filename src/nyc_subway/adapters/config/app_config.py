"""12-factor configuration adapter using environment variables and TOML config."""

import logging
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nyc_subway.domain.models import ClusteringPolicy


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8080, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level, e.g. 'DEBUG' or 'INFO'")

    # Static datasets
    stations_file: str = Field(
        default="data/subway-stations.geojson",
        description="GeoJSON FeatureCollection of subway station points",
    )
    lines_file: str | None = Field(
        default="data/subway-lines.geojson",
        description="GeoJSON file served verbatim at /data/subway-lines (optional)",
    )

    static_dir: str | None = Field(
        default=None,
        description="Directory with the browser map page; looked up as ./static when unset",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Optional TOML file with a [clustering] table overriding the clustering policy
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with clustering overrides",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @field_validator("rate_limit_per_minute")
    @classmethod
    def validate_rate_limit(cls, v: int) -> int:
        """Validate the rate limit is positive."""
        if v < 1:
            raise ValueError("rate_limit_per_minute must be at least 1")
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, or return an empty mapping when none is set."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_clustering_policy(self) -> ClusteringPolicy:
        """Return the clustering policy, applying [clustering] overrides from TOML.

        Raises ValueError if the [clustering] table has unknown keys or invalid values.
        """
        clustering = self._load_toml_data().get("clustering", {})
        if not isinstance(clustering, dict):
            raise ValueError("TOML config 'clustering' must be a table")
        return ClusteringPolicy(**clustering)
