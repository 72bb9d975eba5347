"""Web-Mercator ground resolution helpers.

All angles are taken in degrees.
"""

import math

# Rough estimate of the earth's equatorial radius in km, treating it as a sphere.
EARTH_RADIUS_KM = 6378.137

# Latitude of New York City, used to estimate the size of a pixel at a zoom level.
NYC_LATITUDE = 40.7128

# At zoom level 0 the whole world is 2**8 = 256 pixels wide.
_TILE_SIZE_EXPONENT = 8


def cos_degrees(degrees: float) -> float:
    """Return the cosine of an angle given in degrees."""
    return math.cos(degrees * math.pi / 180)


def ground_resolution(latitude_degrees: float, zoom: int) -> float:
    """Return the ground distance in km covered by one map pixel.

    The earth's circumference at the given latitude is divided by the width of
    the world map in pixels at the given zoom level. Latitude is not validated.

    Args:
        latitude_degrees: Latitude in degrees, expected in [-90, 90].
        zoom: Non-negative map zoom level.

    Returns:
        Kilometers per pixel.
    """
    num_pixels = 2 ** (_TILE_SIZE_EXPONENT + zoom)
    return cos_degrees(latitude_degrees) * 2 * math.pi * EARTH_RADIUS_KM / num_pixels
