"""Maidenhead locator codec.

A locator is built from up to five character pairs, longitude first in each
pair:

    FF SS ss EE XX
    Field / Square / Subsquare / Extended Square / Superextended Square

Each level covers, for long / lat:
    Field:                20 / 10 degrees      (A-R)
    Square:                2 / 1 degrees       (0-9)
    Subsquare:             5 / 2.5 minutes     (a-x)
    Extended Square:      30 / 15 seconds      (0-9)
    Superextended Square: 1.25 / 0.625 seconds (A-X)

Enumeration starts at 180W / 90S, so coordinates are shifted by +180 / +90
before subdividing.

Reference: http://www.w8bh.net/grid_squares.pdf
"""

import math
import string
from dataclasses import dataclass

from .errors import InvalidGrid, InvalidGridLength, InvalidLongLat, UnknownGridError

LONG_OFFSET = 180.0
LAT_OFFSET = 90.0

# Alphabet for each level, in canonical case
ALPHABETS = (
    string.ascii_uppercase[:18],  # A-R
    string.digits,
    string.ascii_lowercase[:24],  # a-x
    string.digits,
    string.ascii_uppercase[:24],  # A-X
)

# Per-level {char: index} lookup
_INDEXES = tuple({char: idx for idx, char in enumerate(alphabet)} for alphabet in ALPHABETS)

# Cell size in degrees at each level
LONG_MULT = (20.0, 2.0, 5.0 / 60, 30.0 / 3600, 1.25 / 3600)
LAT_MULT = (10.0, 1.0, 2.5 / 60, 15.0 / 3600, 0.625 / 3600)

PRECISIONS = (4, 6, 8, 10)

# Cell sizes counted in superextended cells. Longitude and latitude share
# the same ratios, so one table serves both axes.
_UNITS = (57600, 5760, 240, 24, 1)
_LONG_UNITS_PER_DEG = 2880  # 1 / 1.25"
_LAT_UNITS_PER_DEG = 5760   # 1 / 0.625"


@dataclass(frozen=True)
class DecodedLocator:
    """A validated locator and its per-level (x, y) indices."""

    locator: str
    pairs: tuple[tuple[int, int], ...]

    @property
    def precision(self) -> int:
        return len(self.locator)

    @property
    def levels(self) -> int:
        return len(self.pairs)


def canonical_char(char: str, level: int) -> str:
    """Return char in the case used by the given level."""
    return char.lower() if level == 2 else char.upper()


def decode_locator(locator: str) -> DecodedLocator:
    """Validate a locator and split it into per-level indices.

    Surrounding whitespace is stripped before the length check, so
    " FM18lv " decodes like "FM18lv". Only ASCII characters are accepted.

    Args:
        locator: Maidenhead grid square (4, 6, 8 or 10 characters, any case)

    Returns:
        DecodedLocator with canonical string and zero-based indices

    Raises:
        InvalidGridLength: length is not 4, 6, 8 or 10
        InvalidGrid: a character is not valid for its position
    """
    locator = locator.strip()
    if len(locator) not in PRECISIONS:
        raise InvalidGridLength(len(locator))

    canonical = []
    pairs = []
    for level in range(len(locator) // 2):
        pair = []
        for pos in (2 * level, 2 * level + 1):
            # Non-ASCII case mappings can land on ASCII letters (Kelvin sign -> k)
            if not locator[pos].isascii():
                raise InvalidGrid(locator, pos)
            char = canonical_char(locator[pos], level)
            idx = _INDEXES[level].get(char)
            if idx is None:
                raise InvalidGrid(locator, pos)
            canonical.append(char)
            pair.append(idx)
        pairs.append((pair[0], pair[1]))

    return DecodedLocator("".join(canonical), tuple(pairs))


def is_valid_locator(locator: str) -> bool:
    """Check whether a string is a well-formed locator."""
    try:
        decode_locator(locator)
    except (InvalidGrid, InvalidGridLength):
        return False
    return True


def _to_units(value: float, units_per_deg: int) -> int:
    # The closed upper edge (180 long, 90 lat) belongs to the last cell
    total = len(ALPHABETS[0]) * _UNITS[0]
    return min(math.floor(value * units_per_deg), total - 1)


def encode_locator(longitude: float, latitude: float, precision: int) -> str:
    """Build the locator containing a coordinate.

    Args:
        longitude: Decimal degrees, -180 to 180
        latitude: Decimal degrees, -90 to 90
        precision: Locator length, one of 4, 6, 8, 10

    Returns:
        Locator in canonical case (e.g. "FM18lv")

    Raises:
        InvalidLongLat: coordinate out of range
        InvalidGridLength: unsupported precision
        UnknownGridError: subdivision produced an out-of-range index
    """
    if not (-180.0 <= longitude <= 180.0 and -90.0 <= latitude <= 90.0):
        raise InvalidLongLat(longitude, latitude)
    if precision not in PRECISIONS:
        raise InvalidGridLength(precision)

    long_rem = _to_units(longitude + LONG_OFFSET, _LONG_UNITS_PER_DEG)
    lat_rem = _to_units(latitude + LAT_OFFSET, _LAT_UNITS_PER_DEG)

    chars = []
    for level in range(int(precision) // 2):
        alphabet = ALPHABETS[level]
        long_idx, long_rem = divmod(long_rem, _UNITS[level])
        lat_idx, lat_rem = divmod(lat_rem, _UNITS[level])
        for idx in (long_idx, lat_idx):
            if not 0 <= idx < len(alphabet):
                raise UnknownGridError(f"index {idx} out of range at level {level + 1}")
            chars.append(alphabet[idx])

    return "".join(chars)
