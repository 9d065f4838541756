#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pytest",
# ]
# ///
"""Test grid square <-> long/lat mapping."""

import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridsquare.errors import InvalidGrid, InvalidGridLength, InvalidLongLat
from gridsquare.grid_utils import grid_to_cell, grid_to_latlon, grid_to_longlat, longlat_to_grid
from gridsquare.locator import LAT_MULT, LONG_MULT

SAMPLE_GRIDS = [
    "AA00", "RR99", "JO01", "FM18", "FM18lv", "CM98kq", "GG46mo",
    "FM18lv53", "QF56od21", "FM18lv53SL", "AA00aa00AA", "RR99xx99XX", "JJ00aa00AA",
]

SAMPLE_COORDS = [
    (-77.035278, 38.889484),   # Washington, DC
    (-121.2, 38.6),            # Folsom, CA
    (-0.1276, 51.5072),        # London
    (151.2093, -33.8688),      # Sydney
    (0.0, 0.0),
    (-180.0, -90.0),
    (180.0, 90.0),
    (179.9999, -89.9999),
]


def test_grid_to_longlat():
    """Test known grid centers"""
    test_cases = [
        ("FM18lv", -77.0417, 38.8958),  # Washington, DC area
        ("FM18", -77.0, 38.5),
        ("JO01", 1.0, 51.5),            # 4-char grid near London
        ("CM98kq", -121.125, 38.6875),  # Folsom area
        ("AA00", -179.0, -89.5),
    ]

    print("\nGrid square tests:")
    for grid, exp_lon, exp_lat in test_cases:
        lon, lat = grid_to_longlat(grid)
        print(f"  {grid}: ({lon:.4f}°, {lat:.4f}°) - expected: ({exp_lon:.4f}°, {exp_lat:.4f}°)")
        assert abs(lon - exp_lon) < 0.001
        assert abs(lat - exp_lat) < 0.001


def test_grid_to_latlon_order():
    """grid_to_latlon returns (lat, lon)"""
    lat, lon = grid_to_latlon("CN88ra")
    assert abs(lat - 48.02) < 0.01  # Freeland area
    assert abs(lon - -122.54) < 0.01


def test_grid_to_longlat_errors():
    with pytest.raises(InvalidGridLength):
        grid_to_longlat("FM1")
    with pytest.raises(InvalidGrid):
        grid_to_longlat("ZZ00")


@pytest.mark.parametrize("grid", SAMPLE_GRIDS)
def test_center_inside_cell(grid):
    """Decoded point lies strictly within the cell"""
    lon, lat = grid_to_longlat(grid)
    cell = grid_to_cell(grid)
    assert cell.west < lon < cell.east
    assert cell.south < lat < cell.north
    assert cell.center == pytest.approx((lon, lat))


def test_grid_to_cell():
    cell = grid_to_cell("FM18")
    assert cell.west == pytest.approx(-78.0)
    assert cell.south == pytest.approx(38.0)
    assert cell.east == pytest.approx(-76.0)
    assert cell.north == pytest.approx(39.0)
    assert cell.contains(-77.035278, 38.889484)
    assert not cell.contains(-75.0, 38.5)


def test_cell_sizes():
    for grid, level in [("FM18", 1), ("FM18lv", 2), ("FM18lv53", 3), ("FM18lv53SL", 4)]:
        cell = grid_to_cell(grid)
        assert cell.east - cell.west == pytest.approx(LONG_MULT[level])
        assert cell.north - cell.south == pytest.approx(LAT_MULT[level])


@pytest.mark.parametrize("grid", SAMPLE_GRIDS)
def test_grid_round_trip(grid):
    """grid -> long/lat -> grid gives back the same grid"""
    lon, lat = grid_to_longlat(grid)
    assert longlat_to_grid(lon, lat, len(grid)) == grid


def test_grid_round_trip_canonicalizes():
    lon, lat = grid_to_longlat("fm18LV53sl")
    assert longlat_to_grid(lon, lat, 10) == "FM18lv53SL"


@pytest.mark.parametrize("lon, lat", SAMPLE_COORDS)
@pytest.mark.parametrize("precision", [4, 6, 8, 10])
def test_longlat_round_trip(lon, lat, precision):
    """long/lat -> grid -> long/lat stays within one cell"""
    level = precision // 2 - 1
    grid = longlat_to_grid(lon, lat, precision)
    assert len(grid) == precision
    lon2, lat2 = grid_to_longlat(grid)
    assert abs(lon2 - lon) <= LONG_MULT[level]
    assert abs(lat2 - lat) <= LAT_MULT[level]
    cell = grid_to_cell(grid)
    # Edges are sums of float cell sizes, allow for rounding at 180/90
    assert cell.west - 1e-9 <= lon <= cell.east + 1e-9
    assert cell.south - 1e-9 <= lat <= cell.north + 1e-9


def test_longlat_to_grid_washington():
    grid = longlat_to_grid(-77.035278, 38.889484, 6)
    assert len(grid) == 6
    assert grid.startswith("FM18")


def test_longlat_to_grid_errors():
    with pytest.raises(InvalidLongLat):
        longlat_to_grid(200.0, 38.0, 6)
    with pytest.raises(InvalidGridLength):
        longlat_to_grid(-77.0, 38.0, 7)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
