"""Coordinate, bounding box, and region value types.

A region supplies the root extent the codec subdivides, plus the small
amount of region-specific policy needed to stay compatible with PINs
issued by the reference DIGIPIN implementation.
"""

from dataclasses import dataclass
from enum import StrEnum

from pindrop.lib.pincodec.errors import OutOfBounds


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair. Range validity depends on the region."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingBox:
    """An immutable latitude/longitude rectangle."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        if not (self.min_lat < self.max_lat):
            msg = f"min_lat must be less than max_lat, got {self.min_lat} >= {self.max_lat}"
            raise ValueError(msg)
        if not (self.min_lon < self.max_lon):
            msg = f"min_lon must be less than max_lon, got {self.min_lon} >= {self.max_lon}"
            raise ValueError(msg)

    @property
    def center(self) -> Coordinates:
        return Coordinates(
            latitude=(self.min_lat + self.max_lat) / 2,
            longitude=(self.min_lon + self.max_lon) / 2,
        )

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    def contains(self, coordinates: Coordinates) -> bool:
        """Return True if the point lies inside the box, edges included."""
        return (
            self.min_lat <= coordinates.latitude <= self.max_lat
            and self.min_lon <= coordinates.longitude <= self.max_lon
        )

    def check_contains(self, coordinates: Coordinates) -> None:
        """Validate that the point lies inside the box, edges included.

        Latitude is checked before longitude, and the lower limit before the
        upper one. NaN values fail the first comparison they meet.

        Raises:
            OutOfBounds: Naming the first axis and limit that was violated.
        """
        lat, lon = coordinates.latitude, coordinates.longitude
        if not (lat >= self.min_lat):
            raise OutOfBounds("latitude", "min", self.min_lat, lat)
        if not (lat <= self.max_lat):
            raise OutOfBounds("latitude", "max", self.max_lat, lat)
        if not (lon >= self.min_lon):
            raise OutOfBounds("longitude", "min", self.min_lon, lon)
        if not (lon <= self.max_lon):
            raise OutOfBounds("longitude", "max", self.max_lon, lon)


class Region(StrEnum):
    """Named coordinate domains a PIN can be issued in."""

    INDIA = "india"
    WORLD = "world"

    @classmethod
    def parse(cls, value: "Region | str") -> "Region":
        """Resolve a region from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the name is not a known region.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"Unknown region: {value!r}. Available: {[r.value for r in cls]}"
            raise ValueError(msg) from None

    @property
    def root_bounds(self) -> BoundingBox:
        return _ROOT_BOUNDS[self]

    @property
    def decode_precision(self) -> int | None:
        """Decimal places decoded coordinates are rounded to, or None for full precision."""
        return _DECODE_PRECISION[self]

    @property
    def pin_name(self) -> str:
        return _PIN_NAMES[self]


INDIA_BOUNDS = BoundingBox(min_lat=2.5, max_lat=38.5, min_lon=63.5, max_lon=99.5)
WORLD_BOUNDS = BoundingBox(min_lat=-90.0, max_lat=90.0, min_lon=-180.0, max_lon=180.0)

_ROOT_BOUNDS: dict[Region, BoundingBox] = {
    Region.INDIA: INDIA_BOUNDS,
    Region.WORLD: WORLD_BOUNDS,
}

# The reference DIGIPIN library formats decoded coordinates to 6 decimal places
_DECODE_PRECISION: dict[Region, int | None] = {
    Region.INDIA: 6,
    Region.WORLD: None,
}

_PIN_NAMES: dict[Region, str] = {
    Region.INDIA: "DIGIPIN",
    Region.WORLD: "WorldPIN",
}
