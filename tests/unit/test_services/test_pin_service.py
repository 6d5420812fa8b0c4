"""Unit tests for the result-returning PIN service."""

import math
import re

import pytest
from loguru import logger

from pindrop.lib.pincodec import BoundingBox, Coordinates, Region
from pindrop.schemas.pin import CoordinatesSchema
from pindrop.services import pin_service

WORLDPIN_RE = re.compile(r"^[2-9CFJKLMPT]{3}-[2-9CFJKLMPT]{3}-[2-9CFJKLMPT]{4}$")

DELHI = Coordinates(latitude=28.6139, longitude=77.2090)


class TestEncode:
    """Tests for encode()."""

    def test_success(self) -> None:
        result = pin_service.encode(Coordinates(28.622788, 77.213033), "india")
        assert result.success is True
        assert result.pin == "39J-49L-L8T4"
        assert result.grid_bounds is not None
        assert result.error is None
        assert result.error_code is None

    def test_accepts_schema_input(self) -> None:
        result = pin_service.encode(CoordinatesSchema(latitude=28.622788, longitude=77.213033), Region.INDIA)
        assert result.pin == "39J-49L-L8T4"

    def test_out_of_bounds_is_a_result_not_an_exception(self) -> None:
        result = pin_service.encode(Coordinates(51.5074, -0.1278), "india")
        assert result.success is False
        assert result.pin is None
        assert result.error_code == "out_of_bounds"
        assert "outside india bounds" in result.error
        assert "Latitude must be 2.5 to 38.5" in result.error

    def test_nan_is_out_of_bounds(self) -> None:
        result = pin_service.encode(Coordinates(math.nan, 77.0), "india")
        assert result.success is False
        assert result.error_code == "out_of_bounds"

    def test_unknown_region(self) -> None:
        result = pin_service.encode(DELHI, "mars")
        assert result.success is False
        assert result.error_code == "unknown_region"

    def test_rejection_is_logged_as_structured_record(self) -> None:
        records: list[dict] = []
        handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
        try:
            pin_service.encode(Coordinates(51.5074, -0.1278), "india")
        finally:
            logger.remove(handler_id)

        extras = [r["extra"] for r in records if r["extra"].get("event") == "encode_rejected"]
        assert len(extras) == 1
        assert extras[0]["json_output"] is True
        assert extras[0]["region"] == "india"
        assert extras[0]["error_code"] == "out_of_bounds"

    def test_grid_bounds_contain_decoded_point(self) -> None:
        encoded = pin_service.encode(DELHI, "india")
        decoded = pin_service.decode(encoded.pin, "india")
        cell = BoundingBox(**encoded.grid_bounds.model_dump())
        assert cell.contains(decoded.coordinates.to_coordinates())

    @pytest.mark.parametrize("lat", [-90.0, -45.5, 0.0, 33.3, 90.0])
    @pytest.mark.parametrize("lon", [-180.0, -100.1, 0.0, 77.7, 180.0])
    def test_world_always_succeeds(self, lat: float, lon: float) -> None:
        result = pin_service.encode(Coordinates(lat, lon), "world")
        assert result.success is True
        assert WORLDPIN_RE.match(result.pin)


class TestDecode:
    """Tests for decode()."""

    def test_success(self) -> None:
        result = pin_service.decode("39j49ll8t4", "india")
        assert result.success is True
        assert result.coordinates.latitude == pytest.approx(28.622793)
        assert result.coordinates.longitude == pytest.approx(77.213049)
        assert result.grid_bounds.min_lat < result.coordinates.latitude < result.grid_bounds.max_lat

    def test_round_trip_reproduces_pin(self) -> None:
        pin = pin_service.encode(DELHI, "india").pin
        decoded = pin_service.decode(pin, "india")
        assert pin_service.encode(decoded.coordinates, "india").pin == pin

    def test_wrong_length(self) -> None:
        result = pin_service.decode("39J-49L", "india")
        assert result.success is False
        assert result.error_code == "wrong_length"
        assert "10 characters" in result.error

    def test_invalid_characters(self) -> None:
        result = pin_service.decode("39J-49L-L8TO", "india")
        assert result.success is False
        assert result.error_code == "invalid_characters"
        assert "Invalid characters: O" in result.error

    def test_empty(self) -> None:
        result = pin_service.decode("", "world")
        assert result.success is False
        assert result.error == "PIN is required"

    def test_unknown_region(self) -> None:
        result = pin_service.decode("39J-49L-L8T4", "atlantis")
        assert result.success is False
        assert result.error_code == "unknown_region"

    def test_same_pin_differs_by_region(self) -> None:
        india = pin_service.decode("39J-49L-L8T4", "india")
        world = pin_service.decode("39J-49L-L8T4", "world")
        assert india.coordinates != world.coordinates


class TestValidatePinFormat:
    """Tests for validate_pin_format()."""

    def test_valid(self) -> None:
        result = pin_service.validate_pin_format("39j49ll8t4")
        assert result.valid is True
        assert result.normalized == "39J-49L-L8T4"
        assert result.errors is None

    @pytest.mark.parametrize("pin", ["", None, "39J", "39J-49L-L8T4X", "ABCDEFGHIJ", "39J 49L L8T4"])
    def test_invalid_has_errors(self, pin: str | None) -> None:
        result = pin_service.validate_pin_format(pin)
        assert result.valid is False
        assert result.normalized is None
        assert result.errors


class TestBounds:
    """Tests for is_within_bounds() and get_bounds()."""

    def test_get_bounds(self) -> None:
        assert pin_service.get_bounds("india") == BoundingBox(2.5, 38.5, 63.5, 99.5)
        assert pin_service.get_bounds(Region.WORLD) == BoundingBox(-90, 90, -180, 180)

    def test_get_bounds_unknown_region(self) -> None:
        with pytest.raises(ValueError):
            pin_service.get_bounds("moon")

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(2.5, 63.5), (38.5, 99.5), (2.5, 99.5), (38.5, 63.5), (20.0, 80.0)],
    )
    def test_edges_and_inside_are_within_india(self, lat: float, lon: float) -> None:
        assert pin_service.is_within_bounds(Coordinates(lat, lon), "india")

    @pytest.mark.parametrize(("lat", "lon"), [(2.49, 80.0), (38.51, 80.0), (20.0, 63.49), (20.0, 99.51)])
    def test_outside_india(self, lat: float, lon: float) -> None:
        assert not pin_service.is_within_bounds(Coordinates(lat, lon), "india")
        assert pin_service.encode(Coordinates(lat, lon), "india").error_code == "out_of_bounds"

    def test_unknown_region_contains_nothing(self) -> None:
        assert pin_service.is_within_bounds(DELHI, "nowhere") is False


class TestRegions:
    """Tests for describe_region() and list_regions()."""

    def test_describe_india(self) -> None:
        info = pin_service.describe_region("india")
        assert info.region == "india"
        assert info.pin_name == "DIGIPIN"
        assert info.bounds.min_lat == 2.5
        assert 3.5 < info.cell_size.height_m < 4.0

    def test_world_cells_are_larger(self) -> None:
        india = pin_service.describe_region("india")
        world = pin_service.describe_region("world")
        assert world.cell_size.height_m > india.cell_size.height_m

    def test_list_regions(self) -> None:
        assert [r.region for r in pin_service.list_regions()] == ["india", "world"]


class TestPinCellFeature:
    """Tests for pin_cell_feature()."""

    def test_feature_polygon(self) -> None:
        feature = pin_service.pin_cell_feature("39j49ll8t4", "india")
        assert feature.type == "Feature"
        assert feature.geometry["type"] == "Polygon"
        ring = feature.geometry["coordinates"][0]
        assert len(ring) == 5
        assert feature.properties["pin"] == "39J-49L-L8T4"
        assert feature.properties["region"] == "india"
        lon, lat = feature.properties["center"]
        assert lat == pytest.approx(28.622793)
        assert lon == pytest.approx(77.213049)

    def test_malformed_pin_raises(self) -> None:
        with pytest.raises(ValueError):
            pin_service.pin_cell_feature("nope", "india")


class TestBatch:
    """Tests for batch_encode() and batch_decode()."""

    def test_batch_encode_mixed(self) -> None:
        result = pin_service.batch_encode([DELHI, Coordinates(51.5, -0.12)], "india")
        assert result.succeeded == 1
        assert result.failed == 1
        assert result.results[0].success is True
        assert result.results[1].error_code == "out_of_bounds"

    def test_batch_decode_mixed(self) -> None:
        result = pin_service.batch_decode(["39J-49L-L8T4", "bad"], "india")
        assert result.succeeded == 1
        assert result.failed == 1
        assert result.results[1].error_code == "wrong_length"
