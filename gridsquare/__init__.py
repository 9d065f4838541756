"""gridsquare - Maidenhead grid square conversion, distance and bearing."""

from .errors import GridError, InvalidGrid, InvalidGridLength, InvalidLongLat, UnknownGridError
from .locator import DecodedLocator, decode_locator, encode_locator, is_valid_locator
from .grid_utils import GridCell, grid_to_cell, grid_to_longlat, grid_to_latlon, longlat_to_grid
from .geo_utils import (
    EARTH_RADIUS_KM,
    calc_bearing,
    calc_distance_km,
    grid_distance,
    grid_bearing,
    grid_dist_bearing,
    km_to_miles,
    bearing_to_direction,
)
from .config import load_config, save_config, validate_config

__all__ = [
    # Errors
    'GridError',
    'InvalidGrid',
    'InvalidGridLength',
    'InvalidLongLat',
    'UnknownGridError',
    # Locator codec
    'DecodedLocator',
    'decode_locator',
    'encode_locator',
    'is_valid_locator',
    # Coordinate mapping
    'GridCell',
    'grid_to_cell',
    'grid_to_longlat',
    'grid_to_latlon',
    'longlat_to_grid',
    # Geodesy
    'EARTH_RADIUS_KM',
    'calc_bearing',
    'calc_distance_km',
    'grid_distance',
    'grid_bearing',
    'grid_dist_bearing',
    'km_to_miles',
    'bearing_to_direction',
    # Config
    'load_config',
    'save_config',
    'validate_config',
]
