"""Translate a map viewport descriptor into a query rectangle."""

import logging
import math

from nyc_subway.domain.errors import MalformedInputError
from nyc_subway.domain.models import Rectangle

logger = logging.getLogger(__name__)

# The viewport origin moves back by span / VIEWPORT_MARGIN_DIVISOR and each
# extent grows by VIEWPORT_GROWTH_FACTOR, a 10% margin per side. Over-fetching
# keeps stations near the edges from disappearing on zoom in, and from being
# slow to appear on pan or zoom out.
VIEWPORT_MARGIN_DIVISOR = 10
VIEWPORT_GROWTH_FACTOR = 1.2

_CORNER_NAMES = ("sw", "ne")


def _parse_coordinate(value: str, component: str) -> float:
    try:
        parsed = float(value.strip())
    except ValueError:
        raise MalformedInputError(component, f"{value!r} is not a number") from None
    if not math.isfinite(parsed):
        raise MalformedInputError(component, f"{value!r} is not a finite number")
    return parsed


def _parse_corner(raw_corner: str, name: str) -> tuple[float, float]:
    """Parse one "lat,lng" pair."""
    fields = raw_corner.split(",")
    if len(fields) != 2:
        raise MalformedInputError(name, f"expected 'lat,lng', got {raw_corner!r}")
    lat = _parse_coordinate(fields[0], f"{name}.lat")
    lng = _parse_coordinate(fields[1], f"{name}.lng")
    return lat, lng


def parse_viewport(raw: str) -> Rectangle:
    """Parse a "swLat,swLng|neLat,neLng" viewport and grow it by a fixed margin.

    The corners may be given in any order; the rectangle is built from their
    componentwise minimum and maximum. The result is shifted by a tenth of the
    span on each axis and its extents are scaled by 1.2.

    Raises:
        MalformedInputError: If the descriptor cannot be parsed, or describes a
            viewport with no area.
    """
    corners = raw.split("|")
    if len(corners) != 2:
        raise MalformedInputError(
            "viewport", f"expected two corners separated by '|', got {len(corners)}"
        )

    (sw_lat, sw_lng), (ne_lat, ne_lng) = (
        _parse_corner(corner, name) for corner, name in zip(corners, _CORNER_NAMES, strict=True)
    )

    min_lat = min(sw_lat, ne_lat)
    min_lng = min(sw_lng, ne_lng)
    dist_lat = max(sw_lat, ne_lat) - min_lat
    dist_lng = max(sw_lng, ne_lng) - min_lng

    rect = Rectangle(
        min_lng=min_lng - dist_lng / VIEWPORT_MARGIN_DIVISOR,
        min_lat=min_lat - dist_lat / VIEWPORT_MARGIN_DIVISOR,
        width=dist_lng * VIEWPORT_GROWTH_FACTOR,
        height=dist_lat * VIEWPORT_GROWTH_FACTOR,
    )
    if not rect.is_well_formed():
        raise MalformedInputError("viewport", f"{raw!r} does not describe an area")

    logger.debug(f"Resolved viewport {raw!r} to {rect.bounds}")
    return rect
