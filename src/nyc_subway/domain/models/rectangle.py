"""Rectangle domain model."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in degrees: min corner plus extents."""

    min_lng: float
    min_lat: float
    width: float
    height: float

    @classmethod
    def around_point(cls, lng: float, lat: float, epsilon: float) -> "Rectangle":
        """Expand a point by epsilon on each side."""
        return cls(
            min_lng=lng - epsilon,
            min_lat=lat - epsilon,
            width=2 * epsilon,
            height=2 * epsilon,
        )

    @property
    def max_lng(self) -> float:
        return self.min_lng + self.width

    @property
    def max_lat(self) -> float:
        return self.min_lat + self.height

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_lng, min_lat, max_lng, max_lat)."""
        return (self.min_lng, self.min_lat, self.max_lng, self.max_lat)

    def is_well_formed(self) -> bool:
        """Return True when all values are finite and both extents are positive."""
        values = (self.min_lng, self.min_lat, self.width, self.height)
        return all(math.isfinite(v) for v in values) and self.width > 0 and self.height > 0
