"""PIN API endpoints: encode, decode, validate, GeoJSON cell, and batch conversion."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from pindrop.core.config import Settings, get_settings
from pindrop.lib.pincodec import Coordinates, PinCodecError
from pindrop.schemas.common import ErrorResponse
from pindrop.schemas.pin import (
    BatchDecodeRequest,
    BatchDecodeResponse,
    BatchEncodeRequest,
    BatchEncodeResponse,
    DecodeResponse,
    EncodeResponse,
    PinValidationResult,
)
from pindrop.services import pin_service

pins_router = APIRouter(prefix="/pins", tags=["pins"])

_FAILURE_RESPONSES = {422: {"model": ErrorResponse, "description": "Coordinates or PIN rejected"}}


def _failure(error: str | None, code: str | None) -> JSONResponse:
    body = ErrorResponse(detail=error or "Request rejected", code=code)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body.model_dump())


def _check_batch_size(count: int, settings: Settings) -> None:
    if count > settings.batch_max_items:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Batch of {count} items exceeds the limit of {settings.batch_max_items}.",
        )


@pins_router.get("/encode", response_model=EncodeResponse, responses=_FAILURE_RESPONSES)
async def encode_coordinates(
    lat: float = Query(..., description="WGS84 latitude"),  # noqa: B008
    lng: float = Query(..., description="WGS84 longitude"),  # noqa: B008
    region: str | None = Query(None, description="india or world (defaults to the configured region)"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> EncodeResponse | JSONResponse:
    """Encode a coordinate pair into a PIN."""
    result = pin_service.encode(Coordinates(latitude=lat, longitude=lng), region or settings.default_region)
    if not result.success:
        return _failure(result.error, result.error_code)
    return result


@pins_router.get("/decode", response_model=DecodeResponse, responses=_FAILURE_RESPONSES)
async def decode_pin(
    pin: str = Query(..., max_length=64, description="PIN, with or without hyphens"),  # noqa: B008
    region: str | None = Query(None, description="india or world (defaults to the configured region)"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> DecodeResponse | JSONResponse:
    """Decode a PIN into the center of its grid cell."""
    result = pin_service.decode(pin, region or settings.default_region)
    if not result.success:
        return _failure(result.error, result.error_code)
    return result


@pins_router.get("/validate", response_model=PinValidationResult)
async def validate_pin(
    pin: str = Query("", max_length=64, description="PIN to check"),  # noqa: B008
) -> PinValidationResult:
    """Check a PIN's format. Always 200; inspect ``valid``."""
    return pin_service.validate_pin_format(pin)


@pins_router.get("/geojson", responses=_FAILURE_RESPONSES)
async def pin_geojson(
    pin: str = Query(..., max_length=64, description="PIN, with or without hyphens"),  # noqa: B008
    region: str | None = Query(None, description="india or world (defaults to the configured region)"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> JSONResponse:
    """Return a PIN's grid cell as a GeoJSON Feature."""
    try:
        feature = pin_service.pin_cell_feature(pin, region or settings.default_region)
    except PinCodecError as e:
        return _failure(str(e), e.code)
    except ValueError as e:
        return _failure(str(e), pin_service.UNKNOWN_REGION)

    return JSONResponse(content=feature.model_dump(), media_type="application/geo+json")


@pins_router.post("/batch/encode", response_model=BatchEncodeResponse)
async def batch_encode(
    request: BatchEncodeRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> BatchEncodeResponse:
    """Encode many coordinate pairs. Per-item failures are reported in place."""
    _check_batch_size(len(request.items), settings)
    return pin_service.batch_encode(request.items, request.region or settings.default_region)


@pins_router.post("/batch/decode", response_model=BatchDecodeResponse)
async def batch_decode(
    request: BatchDecodeRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> BatchDecodeResponse:
    """Decode many PINs. Per-item failures are reported in place."""
    _check_batch_size(len(request.pins), settings)
    return pin_service.batch_decode(request.pins, request.region or settings.default_region)
