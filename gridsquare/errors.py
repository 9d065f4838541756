"""Error types for grid square conversion."""


class GridError(ValueError):
    """Base class for all grid square conversion errors."""


class InvalidGrid(GridError):
    """A locator character is outside the alphabet for its position."""

    def __init__(self, locator: str, position: int):
        self.locator = locator
        self.position = position
        super().__init__(
            f"Invalid grid square {locator!r}: "
            f"character {locator[position]!r} at position {position + 1} is not allowed there"
        )


class InvalidGridLength(GridError):
    """Locator length or requested precision is not 4, 6, 8 or 10."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid grid length {value!r}: must be 4, 6, 8 or 10")


class InvalidLongLat(GridError):
    """Longitude or latitude is out of range."""

    def __init__(self, longitude: float, latitude: float):
        self.longitude = longitude
        self.latitude = latitude
        super().__init__(
            f"Invalid coordinates (long {longitude}, lat {latitude}): "
            f"longitude must be in [-180, 180] and latitude in [-90, 90]"
        )


class UnknownGridError(GridError):
    """Internal failure while building a grid square. Indicates a bug."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to generate grid: {detail}")
