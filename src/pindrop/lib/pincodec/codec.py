"""Recursive 4x4 grid subdivision codec.

Encoding walks 10 subdivision levels from a region's root box, emitting one
symbol per level for the sub-cell containing the point. Decoding replays the
symbols to narrow the box back down and reports the final cell's center.

Both directions are written as folds: each level derives a new immutable
``BoundingBox`` from the previous one.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from functools import reduce

from pindrop.lib.pincodec.alphabet import DIGIPIN_ALPHABET, GRID_SIZE, GridAlphabet
from pindrop.lib.pincodec.bounds import BoundingBox, Coordinates, Region
from pindrop.lib.pincodec.errors import WrongLength

PIN_LENGTH = 10

_LAST = GRID_SIZE - 1


@dataclass(frozen=True)
class EncodeLevel:
    """One subdivision step taken while encoding a point."""

    level: int
    row: int
    col: int
    symbol: str
    bounds: BoundingBox


def _clamp(index: int) -> int:
    return max(0, min(index, _LAST))


def _locate(bounds: BoundingBox, coordinates: Coordinates) -> tuple[int, int]:
    """Return the clamped ``(row, col)`` of the sub-cell containing the point."""
    lat_step = bounds.lat_span / GRID_SIZE
    lon_step = bounds.lon_span / GRID_SIZE
    row = _LAST - math.floor((coordinates.latitude - bounds.min_lat) / lat_step)
    col = math.floor((coordinates.longitude - bounds.min_lon) / lon_step)
    # Points on the top or right edge of the root box would otherwise land in index 4
    return _clamp(row), _clamp(col)


def _narrow_from_south(bounds: BoundingBox, row: int, col: int) -> BoundingBox:
    """Sub-cell box measured from the south-west corner (encode direction)."""
    lat_step = bounds.lat_span / GRID_SIZE
    lon_step = bounds.lon_span / GRID_SIZE
    min_lon = bounds.min_lon + lon_step * col
    return BoundingBox(
        min_lat=bounds.min_lat + lat_step * (_LAST - row),
        max_lat=bounds.min_lat + lat_step * (GRID_SIZE - row),
        min_lon=min_lon,
        max_lon=min_lon + lon_step,
    )


def _narrow_from_north(bounds: BoundingBox, row: int, col: int) -> BoundingBox:
    """Sub-cell box measured from the north-west corner (decode direction)."""
    lat_step = bounds.lat_span / GRID_SIZE
    lon_step = bounds.lon_span / GRID_SIZE
    min_lon = bounds.min_lon + lon_step * col
    return BoundingBox(
        min_lat=bounds.max_lat - lat_step * (row + 1),
        max_lat=bounds.max_lat - lat_step * row,
        min_lon=min_lon,
        max_lon=min_lon + lon_step,
    )


def iter_encode_levels(
    coordinates: Coordinates,
    root: BoundingBox,
    *,
    alphabet: GridAlphabet = DIGIPIN_ALPHABET,
    depth: int = PIN_LENGTH,
) -> Iterator[EncodeLevel]:
    """Yield every subdivision step for a point, without a bounds check.

    Callers are expected to have validated the point against ``root``.
    """
    bounds = root
    for level in range(1, depth + 1):
        row, col = _locate(bounds, coordinates)
        bounds = _narrow_from_south(bounds, row, col)
        yield EncodeLevel(level=level, row=row, col=col, symbol=alphabet.symbol_at(row, col), bounds=bounds)


def encode_in_bounds(
    coordinates: Coordinates,
    root: BoundingBox,
    *,
    alphabet: GridAlphabet = DIGIPIN_ALPHABET,
) -> tuple[str, BoundingBox]:
    """Encode a point against an arbitrary root box.

    Returns:
        Tuple of the raw 10-symbol string and the final grid cell.

    Raises:
        OutOfBounds: If the point lies outside ``root``.
    """
    root.check_contains(coordinates)
    levels = list(iter_encode_levels(coordinates, root, alphabet=alphabet))
    return "".join(step.symbol for step in levels), levels[-1].bounds


def decode_in_bounds(
    symbols: str,
    root: BoundingBox,
    *,
    alphabet: GridAlphabet = DIGIPIN_ALPHABET,
) -> tuple[Coordinates, BoundingBox]:
    """Decode raw symbols against an arbitrary root box.

    Returns:
        Tuple of the final cell's center and the cell itself.

    Raises:
        WrongLength: If ``symbols`` is not exactly 10 characters.
        InvalidSymbol: If any character is not in ``alphabet``.
    """
    if len(symbols) != PIN_LENGTH:
        raise WrongLength(len(symbols), PIN_LENGTH)

    cell = reduce(
        lambda bounds, symbol: _narrow_from_north(bounds, *alphabet.cell_of(symbol)),
        symbols,
        root,
    )
    return cell.center, cell


def encode(coordinates: Coordinates, region: Region) -> tuple[str, BoundingBox]:
    """Encode a point within a region into raw (unhyphenated) symbols.

    Raises:
        OutOfBounds: If the point lies outside the region's root bounds.
    """
    return encode_in_bounds(coordinates, region.root_bounds)


def decode(symbols: str, region: Region) -> tuple[Coordinates, BoundingBox]:
    """Decode raw symbols within a region into the cell center and cell.

    Regions with a ``decode_precision`` round the center to that many decimal
    places. The returned cell is always the one narrowed from the north
    while reading the symbols; it is not rebuilt by re-encoding the rounded
    center, which would match it only to within floating-point error.

    Raises:
        WrongLength: If ``symbols`` is not exactly 10 characters.
        InvalidSymbol: If any character is not a grid symbol.
    """
    center, cell = decode_in_bounds(symbols, region.root_bounds)
    places = region.decode_precision
    if places is not None:
        center = Coordinates(latitude=round(center.latitude, places), longitude=round(center.longitude, places))
    return center, cell
