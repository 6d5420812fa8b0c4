"""Pydantic v2 schemas for PIN encoding, decoding, and validation results."""

from typing import Any

from pydantic import BaseModel, Field

from pindrop.lib.pincodec import Coordinates


class CoordinatesSchema(BaseModel):
    """A latitude/longitude pair."""

    model_config = {"from_attributes": True}

    latitude: float
    longitude: float

    def to_coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class BoundingBoxSchema(BaseModel):
    """A latitude/longitude rectangle."""

    model_config = {"from_attributes": True}

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


class EncodeResponse(BaseModel):
    """Result of encoding coordinates into a PIN."""

    success: bool
    pin: str | None = None
    grid_bounds: BoundingBoxSchema | None = None
    error: str | None = None
    error_code: str | None = None


class DecodeResponse(BaseModel):
    """Result of decoding a PIN into coordinates."""

    success: bool
    coordinates: CoordinatesSchema | None = None
    grid_bounds: BoundingBoxSchema | None = None
    error: str | None = None
    error_code: str | None = None


class PinValidationResult(BaseModel):
    """Result of checking a PIN's format."""

    valid: bool
    normalized: str | None = None
    errors: list[str] | None = None


class CellSize(BaseModel):
    """Approximate ground size of a grid cell in meters."""

    height_m: float
    width_m: float


class RegionResponse(BaseModel):
    """A region's root bounds and terminal cell precision."""

    region: str
    pin_name: str
    bounds: BoundingBoxSchema
    cell_degrees: CoordinatesSchema = Field(description="Latitude/longitude span of a 10-level cell in degrees")
    cell_size: CellSize = Field(description="Approximate cell size at the region's center latitude")


class PinCellFeature(BaseModel):
    """A decoded PIN's grid cell as a GeoJSON Feature."""

    type: str = "Feature"
    geometry: dict[str, Any]
    properties: dict[str, Any]


# --- Batch schemas ---


class BatchEncodeRequest(BaseModel):
    """Request to encode many coordinate pairs in one call."""

    region: str | None = None
    items: list[CoordinatesSchema] = Field(..., min_length=1)


class BatchDecodeRequest(BaseModel):
    """Request to decode many PINs in one call."""

    region: str | None = None
    pins: list[str] = Field(..., min_length=1)


class BatchEncodeResponse(BaseModel):
    """Per-item results of a batch encode, in request order."""

    succeeded: int
    failed: int
    results: list[EncodeResponse]


class BatchDecodeResponse(BaseModel):
    """Per-item results of a batch decode, in request order."""

    succeeded: int
    failed: int
    results: list[DecodeResponse]
