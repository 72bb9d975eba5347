"""Station domain model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Station:
    """Represents a subway station loaded from the static dataset.

    ``name`` and ``notes`` are optional here so that incomplete records can be
    loaded; they are required when the station is rendered.
    """

    longitude: float
    latitude: float
    name: str | None = None
    notes: str | None = None
    properties: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return the (longitude, latitude) pair."""
        return (self.longitude, self.latitude)
