"""Mapping between Maidenhead grid squares and long/lat coordinates."""

from dataclasses import dataclass

from .locator import LAT_MULT, LAT_OFFSET, LONG_MULT, LONG_OFFSET, decode_locator, encode_locator


@dataclass(frozen=True)
class GridCell:
    """Bounding box of a grid square, in decimal degrees."""

    west: float
    south: float
    east: float
    north: float

    @property
    def center(self) -> tuple[float, float]:
        """(longitude, latitude) of the cell center."""
        return (self.west + self.east) / 2, (self.south + self.north) / 2

    def contains(self, longitude: float, latitude: float) -> bool:
        return self.west <= longitude <= self.east and self.south <= latitude <= self.north


def grid_to_cell(grid: str) -> GridCell:
    """Get the bounding box of a grid square.

    Args:
        grid: Maidenhead grid square (4, 6, 8 or 10 characters)

    Returns:
        GridCell with west/south/east/north edges

    Raises:
        InvalidGridLength, InvalidGrid: if the grid square is malformed
    """
    decoded = decode_locator(grid)
    west = sum(x * m for (x, _), m in zip(decoded.pairs, LONG_MULT)) - LONG_OFFSET
    south = sum(y * m for (_, y), m in zip(decoded.pairs, LAT_MULT)) - LAT_OFFSET
    last = decoded.levels - 1
    return GridCell(west, south, west + LONG_MULT[last], south + LAT_MULT[last])


def grid_to_longlat(grid: str) -> tuple[float, float]:
    """Convert Maidenhead grid to long/lat (center of grid).

    Args:
        grid: Maidenhead grid square (4, 6, 8 or 10 characters)

    Returns:
        Tuple of (longitude, latitude)

    Raises:
        InvalidGridLength, InvalidGrid: if the grid square is malformed
    """
    decoded = decode_locator(grid)
    last = decoded.levels - 1
    long = sum(x * m for (x, _), m in zip(decoded.pairs, LONG_MULT))
    lat = sum(y * m for (_, y), m in zip(decoded.pairs, LAT_MULT))
    # Center of the smallest cell present
    long += LONG_MULT[last] / 2
    lat += LAT_MULT[last] / 2
    return long - LONG_OFFSET, lat - LAT_OFFSET


def grid_to_latlon(grid: str) -> tuple[float, float]:
    """Same as grid_to_longlat, but returns (latitude, longitude)."""
    long, lat = grid_to_longlat(grid)
    return lat, long


def longlat_to_grid(longitude: float, latitude: float, precision: int) -> str:
    """Convert long/lat to a Maidenhead grid square.

    Args:
        longitude: Decimal degrees, -180 to 180
        latitude: Decimal degrees, -90 to 90
        precision: Grid length, one of 4, 6, 8, 10

    Returns:
        Grid square (e.g. "FM18lv")

    Raises:
        InvalidLongLat, InvalidGridLength, UnknownGridError
    """
    return encode_locator(longitude, latitude, precision)
