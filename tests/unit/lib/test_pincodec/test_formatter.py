"""Unit tests for PIN normalization and the hyphenated public format."""

import pytest

from pindrop.lib.pincodec.bounds import Coordinates, Region
from pindrop.lib.pincodec.errors import InvalidCharacters, OutOfBounds, WrongLength
from pindrop.lib.pincodec.formatter import (
    PIN_PATTERN,
    decode_from_pin,
    encode_to_pin,
    hyphenate,
    is_valid_format,
    normalize,
    strip,
    validate,
)


class TestHyphenate:
    """Tests for hyphenate() and strip()."""

    def test_groups_three_three_four(self) -> None:
        assert hyphenate("39J49LL8T4") == "39J-49L-L8T4"

    def test_strip_removes_hyphens_and_uppercases(self) -> None:
        assert strip("39j-49l-l8t4") == "39J49LL8T4"

    def test_strip_removes_misplaced_hyphens(self) -> None:
        assert strip("3-9-J-4-9-L-L-8-T-4") == "39J49LL8T4"


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.parametrize(
        "raw",
        ["39J-49L-L8T4", "39J49LL8T4", "39j-49l-l8t4", "39j49ll8t4", "39J-49LL8T4"],
    )
    def test_valid_forms(self, raw: str) -> None:
        assert normalize(raw) == "39J-49L-L8T4"

    @pytest.mark.parametrize("raw", ["", "39J-49L", "39J-49L-L8T44", "---"])
    def test_wrong_length(self, raw: str) -> None:
        with pytest.raises(WrongLength):
            normalize(raw)

    def test_invalid_characters_listed_once_in_order(self) -> None:
        with pytest.raises(InvalidCharacters) as exc_info:
            normalize("A0J-49L-A0T4")
        assert exc_info.value.characters == ["A", "0"]
        assert exc_info.value.code == "invalid_characters"

    def test_whitespace_is_invalid(self) -> None:
        with pytest.raises(InvalidCharacters) as exc_info:
            normalize(" 39J49LL8T")
        assert exc_info.value.characters == [" "]

    def test_length_checked_before_characters(self) -> None:
        with pytest.raises(WrongLength):
            normalize("ABC")

    def test_output_matches_wire_pattern(self) -> None:
        assert PIN_PATTERN.match(normalize("fc98j327k4"))


class TestValidate:
    """Tests for validate() and is_valid_format()."""

    def test_valid_pin_has_no_errors(self) -> None:
        assert validate("39J-49L-L8T4") == []
        assert is_valid_format("39j49ll8t4")

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_is_required(self, raw: str | None) -> None:
        assert validate(raw) == ["PIN is required"]
        assert not is_valid_format(raw)

    def test_wrong_length_reported(self) -> None:
        errors = validate("39J-49L")
        assert errors == ["PIN must be 10 characters (excluding hyphens)"]

    def test_invalid_characters_reported(self) -> None:
        errors = validate("39J-49L-L8TA")
        assert len(errors) == 1
        assert errors[0].startswith("Invalid characters: A.")
        assert "Valid characters are: 2, 3, 4, 5, 6, 7, 8, 9, C, F, J, K, L, M, P, T" in errors[0]

    def test_all_problems_reported_together(self) -> None:
        errors = validate("XYZ")
        assert len(errors) == 2
        assert "10 characters" in errors[0]
        assert "X, Y, Z" in errors[1]

    @pytest.mark.parametrize(
        "raw",
        ["2222222222", "TTTTTTTTTT", "fc9-8j3-27k4", "56L-MPT-2345", "CFJ-KLM-PT98"],
    )
    def test_any_alphabet_string_is_valid(self, raw: str) -> None:
        assert is_valid_format(raw)
        assert PIN_PATTERN.match(normalize(raw))


class TestEncodeToPin:
    """Tests for encode_to_pin() and decode_from_pin()."""

    def test_encode_hyphenated(self) -> None:
        pin, cell = encode_to_pin(Coordinates(28.622788, 77.213033), Region.INDIA)
        assert pin == "39J-49L-L8T4"
        assert cell.contains(Coordinates(28.622788, 77.213033))

    def test_encode_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBounds):
            encode_to_pin(Coordinates(51.5, -0.12), Region.INDIA)

    def test_decode_accepts_loose_input(self) -> None:
        strict = decode_from_pin("39J-49L-L8T4", Region.INDIA)
        loose = decode_from_pin("39j49ll8t4", Region.INDIA)
        assert strict == loose

    def test_decode_rejects_invalid_characters(self) -> None:
        with pytest.raises(InvalidCharacters):
            decode_from_pin("39J-49L-L8TO", Region.INDIA)

    def test_delhi_round_trip(self) -> None:
        delhi = Coordinates(28.6139, 77.2090)
        pin, _ = encode_to_pin(delhi, Region.INDIA)
        center, cell = decode_from_pin(pin, Region.INDIA)
        assert encode_to_pin(cell.center, Region.INDIA)[0] == pin
        assert encode_to_pin(center, Region.INDIA)[0] == pin

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(-90, -180), (90, 180), (0, 0), (51.5074, -0.1278), (-33.8688, 151.2093), (64.1466, -21.9426)],
    )
    def test_world_pins_match_wire_pattern(self, lat: float, lon: float) -> None:
        pin, _ = encode_to_pin(Coordinates(lat, lon), Region.WORLD)
        assert len(pin) == 13
        assert PIN_PATTERN.match(pin)
