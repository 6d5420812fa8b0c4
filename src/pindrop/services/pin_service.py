"""PIN service: result-returning encode/decode/validate operations for callers.

The codec library raises ``PinCodecError`` subclasses; this layer turns
every input-validation failure into a success/failure result so that no
public operation raises on malformed user input.
"""

from loguru import logger
from shapely.geometry import box, mapping

from pindrop.core.logging import structured_logger
from pindrop.lib.pincodec import (
    BoundingBox,
    Coordinates,
    PinCodecError,
    Region,
    cell_size_meters,
    decode_from_pin,
    degrees_per_level,
    encode_to_pin,
    encode_in_bounds,
    normalize,
    validate,
)
from pindrop.schemas.pin import (
    BatchDecodeResponse,
    BatchEncodeResponse,
    BoundingBoxSchema,
    CellSize,
    CoordinatesSchema,
    DecodeResponse,
    EncodeResponse,
    PinCellFeature,
    PinValidationResult,
    RegionResponse,
)

UNKNOWN_REGION = "unknown_region"


def _as_coordinates(coordinates: Coordinates | CoordinatesSchema) -> Coordinates:
    if isinstance(coordinates, Coordinates):
        return coordinates
    return coordinates.to_coordinates()


def encode(coordinates: Coordinates | CoordinatesSchema, region: Region | str) -> EncodeResponse:
    """Encode coordinates into a hyphenated PIN for a region.

    Args:
        coordinates: Point to encode.
        region: Region member or name (``"india"`` / ``"world"``).

    Returns:
        EncodeResponse with the PIN and grid cell, or the error.
    """
    try:
        resolved = Region.parse(region)
    except ValueError as e:
        return EncodeResponse(success=False, error=str(e), error_code=UNKNOWN_REGION)

    point = _as_coordinates(coordinates)
    try:
        pin, cell = encode_to_pin(point, resolved)
    except PinCodecError as e:
        bounds = resolved.root_bounds
        structured_logger("encode_rejected", region=resolved.value, error_code=e.code).info(
            f"Rejected {resolved.pin_name} encode for ({point.latitude}, {point.longitude}): {e}"
        )
        return EncodeResponse(
            success=False,
            error=(
                f"Coordinates outside {resolved.value} bounds: {e}. "
                f"Latitude must be {bounds.min_lat} to {bounds.max_lat}, "
                f"longitude must be {bounds.min_lon} to {bounds.max_lon}"
            ),
            error_code=e.code,
        )

    logger.debug(f"Encoded ({point.latitude}, {point.longitude}) as {resolved.pin_name} {pin}")
    return EncodeResponse(success=True, pin=pin, grid_bounds=BoundingBoxSchema.model_validate(cell))


def decode(pin: str, region: Region | str) -> DecodeResponse:
    """Decode a PIN into the center of its grid cell.

    Args:
        pin: PIN text, any case, hyphens optional.
        region: Region member or name.

    Returns:
        DecodeResponse with the coordinates and grid cell, or the error.
    """
    try:
        resolved = Region.parse(region)
    except ValueError as e:
        return DecodeResponse(success=False, error=str(e), error_code=UNKNOWN_REGION)

    try:
        center, cell = decode_from_pin(pin or "", resolved)
    except PinCodecError as e:
        message = ", ".join(validate(pin)) or str(e)
        structured_logger("decode_rejected", region=resolved.value, error_code=e.code).info(
            f"Rejected {resolved.pin_name} decode for {pin!r}: {message}"
        )
        return DecodeResponse(success=False, error=message, error_code=e.code)

    logger.debug(f"Decoded {resolved.pin_name} {pin!r} to ({center.latitude}, {center.longitude})")
    return DecodeResponse(
        success=True,
        coordinates=CoordinatesSchema.model_validate(center),
        grid_bounds=BoundingBoxSchema.model_validate(cell),
    )


def validate_pin_format(pin: str | None) -> PinValidationResult:
    """Check a PIN's format without decoding it.

    Returns:
        PinValidationResult with the canonical form when valid, otherwise
        every problem found.
    """
    errors = validate(pin)
    if errors:
        return PinValidationResult(valid=False, errors=errors)
    return PinValidationResult(valid=True, normalized=normalize(pin or ""))


def is_within_bounds(coordinates: Coordinates | CoordinatesSchema, region: Region | str) -> bool:
    """Return True if the point lies inside the region's root bounds, edges included.

    An unknown region contains nothing.
    """
    try:
        resolved = Region.parse(region)
    except ValueError:
        return False
    return resolved.root_bounds.contains(_as_coordinates(coordinates))


def get_bounds(region: Region | str) -> BoundingBox:
    """Return a region's root bounding box.

    Raises:
        ValueError: If the region is unknown.
    """
    return Region.parse(region).root_bounds


def describe_region(region: Region | str) -> RegionResponse:
    """Return a region's bounds and the size of its terminal grid cells.

    Raises:
        ValueError: If the region is unknown.
    """
    resolved = Region.parse(region)
    bounds = resolved.root_bounds
    lat_degrees, lon_degrees = degrees_per_level(resolved)

    # Measure a real cell at the root center, where distortion is representative
    _, center_cell = encode_in_bounds(bounds.center, bounds)
    height_m, width_m = cell_size_meters(center_cell)

    return RegionResponse(
        region=resolved.value,
        pin_name=resolved.pin_name,
        bounds=BoundingBoxSchema.model_validate(bounds),
        cell_degrees=CoordinatesSchema(latitude=lat_degrees, longitude=lon_degrees),
        cell_size=CellSize(height_m=height_m, width_m=width_m),
    )


def list_regions() -> list[RegionResponse]:
    return [describe_region(region) for region in Region]


def pin_cell_feature(pin: str, region: Region | str) -> PinCellFeature:
    """Build a GeoJSON Feature for a PIN's grid cell.

    Raises:
        ValueError: If the region is unknown or the PIN is malformed.
    """
    resolved = Region.parse(region)
    center, cell = decode_from_pin(pin, resolved)
    polygon = box(cell.min_lon, cell.min_lat, cell.max_lon, cell.max_lat)
    return PinCellFeature(
        geometry=mapping(polygon),
        properties={
            "pin": normalize(pin),
            "region": resolved.value,
            "center": [center.longitude, center.latitude],
        },
    )


def batch_encode(items: list[CoordinatesSchema] | list[Coordinates], region: Region | str) -> BatchEncodeResponse:
    """Encode many points; one failure never affects the others."""
    results = [encode(item, region) for item in items]
    succeeded = sum(1 for r in results if r.success)
    return BatchEncodeResponse(succeeded=succeeded, failed=len(results) - succeeded, results=results)


def batch_decode(pins: list[str], region: Region | str) -> BatchDecodeResponse:
    """Decode many PINs; one failure never affects the others."""
    results = [decode(pin, region) for pin in pins]
    succeeded = sum(1 for r in results if r.success)
    return BatchDecodeResponse(succeeded=succeeded, failed=len(results) - succeeded, results=results)
