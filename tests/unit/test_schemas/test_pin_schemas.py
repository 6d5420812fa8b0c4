"""Unit tests for PIN Pydantic schemas."""

import pytest
from pydantic import ValidationError

from pindrop.lib.pincodec import BoundingBox, Coordinates
from pindrop.schemas.common import ErrorResponse
from pindrop.schemas.pin import (
    BatchDecodeRequest,
    BatchEncodeRequest,
    BoundingBoxSchema,
    CoordinatesSchema,
    EncodeResponse,
)


class TestCoordinatesSchema:
    """Tests for CoordinatesSchema."""

    def test_from_dataclass(self) -> None:
        schema = CoordinatesSchema.model_validate(Coordinates(latitude=1.5, longitude=2.5))
        assert schema.latitude == 1.5
        assert schema.to_coordinates() == Coordinates(1.5, 2.5)


class TestBoundingBoxSchema:
    """Tests for BoundingBoxSchema."""

    def test_from_dataclass(self) -> None:
        box = BoundingBox(min_lat=2.5, max_lat=38.5, min_lon=63.5, max_lon=99.5)
        schema = BoundingBoxSchema.model_validate(box)
        assert schema.model_dump() == {"min_lat": 2.5, "max_lat": 38.5, "min_lon": 63.5, "max_lon": 99.5}
        assert BoundingBox(**schema.model_dump()) == box


class TestResponses:
    """Tests for result and error models."""

    def test_encode_failure_defaults(self) -> None:
        result = EncodeResponse(success=False, error="nope", error_code="out_of_bounds")
        assert result.pin is None
        assert result.grid_bounds is None

    def test_error_response_optional_errors(self) -> None:
        assert ErrorResponse(detail="bad", code="wrong_length").errors is None


class TestBatchRequests:
    """Tests for batch request validation."""

    def test_encode_requires_items(self) -> None:
        with pytest.raises(ValidationError):
            BatchEncodeRequest(items=[])

    def test_decode_region_optional(self) -> None:
        request = BatchDecodeRequest(pins=["2LL-LLL-LLLL"])
        assert request.region is None
