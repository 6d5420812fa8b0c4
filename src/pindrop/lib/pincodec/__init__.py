"""PIN codec library: reversible grid-subdivision geocodes (DIGIPIN / WorldPIN).

Public API:
    - Coordinates / BoundingBox: Immutable point and rectangle value types
    - Region: INDIA and WORLD domains with their root bounds
    - GridAlphabet / DIGIPIN_ALPHABET: The 4x4 symbol table
    - encode / decode: Raw 10-symbol codec for a region
    - encode_in_bounds / decode_in_bounds: Codec over an arbitrary root box
    - iter_encode_levels: Per-level encode trace
    - normalize / validate / is_valid_format: PIN text handling
    - encode_to_pin / decode_from_pin: Hyphenated public form
    - cell_size_meters / degrees_per_level: Cell precision helpers
    - PinCodecError and subclasses: Input-validation failures
"""

from pindrop.lib.pincodec.alphabet import DIGIPIN_ALPHABET, DIGIPIN_GRID, GRID_SIZE, GridAlphabet
from pindrop.lib.pincodec.bounds import INDIA_BOUNDS, WORLD_BOUNDS, BoundingBox, Coordinates, Region
from pindrop.lib.pincodec.codec import (
    PIN_LENGTH,
    EncodeLevel,
    decode,
    decode_in_bounds,
    encode,
    encode_in_bounds,
    iter_encode_levels,
)
from pindrop.lib.pincodec.errors import (
    InvalidCharacters,
    InvalidSymbol,
    OutOfBounds,
    PinCodecError,
    WrongLength,
)
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
from pindrop.lib.pincodec.precision import cell_size_meters, degrees_per_level

__all__ = [
    "BoundingBox",
    "Coordinates",
    "DIGIPIN_ALPHABET",
    "DIGIPIN_GRID",
    "EncodeLevel",
    "GRID_SIZE",
    "GridAlphabet",
    "INDIA_BOUNDS",
    "InvalidCharacters",
    "InvalidSymbol",
    "OutOfBounds",
    "PIN_LENGTH",
    "PIN_PATTERN",
    "PinCodecError",
    "Region",
    "WORLD_BOUNDS",
    "WrongLength",
    "cell_size_meters",
    "decode",
    "decode_from_pin",
    "decode_in_bounds",
    "degrees_per_level",
    "encode",
    "encode_in_bounds",
    "encode_to_pin",
    "hyphenate",
    "is_valid_format",
    "iter_encode_levels",
    "normalize",
    "strip",
    "validate",
]
