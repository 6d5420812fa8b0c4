"""PIN text normalization and the hyphenated public format.

The public form is ``XXX-XXX-XXXX``: uppercase, hyphens after the 3rd and
6th symbols. Input is accepted in any case, with or without hyphens.
"""

import re

from pindrop.lib.pincodec import codec
from pindrop.lib.pincodec.alphabet import DIGIPIN_ALPHABET
from pindrop.lib.pincodec.bounds import BoundingBox, Coordinates, Region
from pindrop.lib.pincodec.codec import PIN_LENGTH
from pindrop.lib.pincodec.errors import InvalidCharacters, WrongLength

SEPARATOR = "-"

# Group sizes of the hyphenated form
_GROUPS = (3, 3, 4)

_SYMBOL_CLASS = "[2-9CFJKLMPT]"
PIN_PATTERN = re.compile(rf"^{_SYMBOL_CLASS}{{3}}-{_SYMBOL_CLASS}{{3}}-{_SYMBOL_CLASS}{{4}}$")


def strip(raw: str) -> str:
    """Uppercase a PIN and remove all separators."""
    return raw.upper().replace(SEPARATOR, "")


def hyphenate(symbols: str) -> str:
    """Insert separators into 10 raw symbols: ``ABCDEFGHIJ`` -> ``ABC-DEF-GHIJ``."""
    parts = []
    start = 0
    for size in _GROUPS:
        parts.append(symbols[start : start + size])
        start += size
    return SEPARATOR.join(parts)


def _invalid_characters(symbols: str) -> list[str]:
    # dict preserves first-appearance order while deduplicating
    return list(dict.fromkeys(c for c in symbols if c not in DIGIPIN_ALPHABET))


def normalize(raw: str) -> str:
    """Normalize a user-supplied PIN into the canonical hyphenated form.

    Args:
        raw: PIN text, any case, hyphens optional.

    Returns:
        The canonical ``XXX-XXX-XXXX`` form.

    Raises:
        WrongLength: If the PIN is not 10 characters after removing hyphens.
        InvalidCharacters: If any character is outside the symbol alphabet.
    """
    symbols = strip(raw)
    if len(symbols) != PIN_LENGTH:
        raise WrongLength(len(symbols), PIN_LENGTH)
    invalid = _invalid_characters(symbols)
    if invalid:
        raise InvalidCharacters(invalid)
    return hyphenate(symbols)


def validate(raw: str | None) -> list[str]:
    """Collect every format problem with a PIN.

    Unlike :func:`normalize`, which stops at the first failure, this reports
    a wrong length and invalid characters together.

    Returns:
        Human-readable error messages; empty if the PIN is well-formed.
    """
    if not raw:
        return ["PIN is required"]

    errors: list[str] = []
    symbols = strip(raw)
    if len(symbols) != PIN_LENGTH:
        errors.append(f"PIN must be {PIN_LENGTH} characters (excluding hyphens)")

    invalid = _invalid_characters(symbols)
    if invalid:
        valid = ", ".join(DIGIPIN_ALPHABET.sorted_symbols)
        errors.append(f"Invalid characters: {', '.join(invalid)}. Valid characters are: {valid}")

    return errors


def is_valid_format(raw: str | None) -> bool:
    """Return True if ``raw`` normalizes successfully."""
    return not validate(raw)


def encode_to_pin(coordinates: Coordinates, region: Region) -> tuple[str, BoundingBox]:
    """Encode a point into its hyphenated PIN and grid cell.

    Raises:
        OutOfBounds: If the point lies outside the region.
    """
    symbols, cell = codec.encode(coordinates, region)
    return hyphenate(symbols), cell


def decode_from_pin(pin: str, region: Region) -> tuple[Coordinates, BoundingBox]:
    """Normalize and decode a PIN into the cell center and grid cell.

    Raises:
        WrongLength: If the PIN is not 10 characters after removing hyphens.
        InvalidCharacters: If any character is outside the symbol alphabet.
    """
    return codec.decode(strip(normalize(pin)), region)
