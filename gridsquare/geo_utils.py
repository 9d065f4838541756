"""Distance and bearing calculations between coordinates and grid squares.

Spherical Earth only, using the IUGG mean radius.
"""

import math

from .grid_utils import grid_to_longlat

EARTH_RADIUS_KM = 6371.0088
KM_PER_MILE = 1.609344


def calc_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate bearing from point 1 to point 2 in degrees.

    Args:
        lat1, lon1: Starting point latitude and longitude
        lat2, lon2: Ending point latitude and longitude

    Returns:
        Initial great-circle bearing in degrees (0-360)
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlon = lon2 - lon1
    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    bearing = math.atan2(x, y)
    return (math.degrees(bearing) + 360) % 360


def calc_distance_km(lat1: float, lon1: float, lat2: float, lon2: float,
                     radius_km: float = EARTH_RADIUS_KM) -> float:
    """Calculate great-circle distance between two points in kilometers.

    Args:
        lat1, lon1: Starting point latitude and longitude
        lat2, lon2: Ending point latitude and longitude
        radius_km: Sphere radius (defaults to Earth mean radius)

    Returns:
        Distance in kilometers
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    return radius_km * c


def grid_dist_bearing(grid_a: str, grid_b: str,
                      radius_km: float = EARTH_RADIUS_KM) -> tuple[float, float]:
    """Distance and bearing from one grid square to another.

    Both grids are resolved to their centers once.

    Args:
        grid_a: Starting grid square
        grid_b: Destination grid square
        radius_km: Sphere radius (defaults to Earth mean radius)

    Returns:
        Tuple of (distance_km, bearing_deg)

    Raises:
        GridError: if either grid square is invalid (grid_a is checked first)
    """
    lon1, lat1 = grid_to_longlat(grid_a)
    lon2, lat2 = grid_to_longlat(grid_b)
    return (calc_distance_km(lat1, lon1, lat2, lon2, radius_km),
            calc_bearing(lat1, lon1, lat2, lon2))


def grid_distance(grid_a: str, grid_b: str, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance in km between the centers of two grid squares."""
    lon1, lat1 = grid_to_longlat(grid_a)
    lon2, lat2 = grid_to_longlat(grid_b)
    return calc_distance_km(lat1, lon1, lat2, lon2, radius_km)


def grid_bearing(grid_a: str, grid_b: str) -> float:
    """Initial bearing in degrees (0-360) from grid_a toward grid_b."""
    lon1, lat1 = grid_to_longlat(grid_a)
    lon2, lat2 = grid_to_longlat(grid_b)
    return calc_bearing(lat1, lon1, lat2, lon2)


def km_to_miles(km: float) -> float:
    return km / KM_PER_MILE


def bearing_to_direction(bearing: float) -> str:
    """Convert bearing to compass direction.

    Args:
        bearing: Bearing in degrees (0-360)

    Returns:
        Compass direction (N, NNE, NE, etc.)
    """
    dirs = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
            "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]
    idx = round(bearing / 22.5) % 16
    return dirs[idx]
