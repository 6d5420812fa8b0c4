"""Approximate ground size of grid cells, for reasoning about PIN precision."""

import math

from pindrop.lib.pincodec.alphabet import GRID_SIZE
from pindrop.lib.pincodec.bounds import BoundingBox, Region
from pindrop.lib.pincodec.codec import PIN_LENGTH

METERS_PER_DEGREE = 111_320


def degrees_per_level(region: Region, level: int = PIN_LENGTH) -> tuple[float, float]:
    """Return the ``(lat_degrees, lon_degrees)`` span of a cell at a subdivision level.

    Args:
        region: Region whose root box is subdivided.
        level: Subdivision level, 0 (root) to 10.

    Raises:
        ValueError: If ``level`` is outside 0..10.
    """
    if not (0 <= level <= PIN_LENGTH):
        msg = f"level must be between 0 and {PIN_LENGTH}, got {level}"
        raise ValueError(msg)
    divisor = GRID_SIZE**level
    root = region.root_bounds
    return root.lat_span / divisor, root.lon_span / divisor


def cell_size_meters(cell: BoundingBox) -> tuple[float, float]:
    """Approximate ``(height_m, width_m)`` of a cell.

    Uses the spherical 111.32 km-per-degree approximation, scaling the
    east-west extent by the cosine of the cell's center latitude. Width
    collapses towards zero at the poles.
    """
    height = cell.lat_span * METERS_PER_DEGREE
    width = cell.lon_span * METERS_PER_DEGREE * math.cos(math.radians(cell.center.latitude))
    return height, max(width, 0.0)
