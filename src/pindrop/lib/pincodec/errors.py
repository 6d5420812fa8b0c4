"""Error hierarchy for PIN encoding, decoding, and format validation.

Every error is a ``ValueError`` subclass so callers that only care about
"bad input" can catch ``ValueError``. Each carries a machine-readable
``code`` used by the service layer when building result objects.
"""


class PinCodecError(ValueError):
    """Base class for all PIN codec input-validation failures."""

    code = "pin_codec_error"


class OutOfBounds(PinCodecError):
    """Raised when a coordinate lies outside a region's root bounding box.

    Args:
        axis: ``"latitude"`` or ``"longitude"``.
        bound: ``"min"`` or ``"max"``, the limit that was violated.
        limit: The numeric value of the violated limit.
        value: The offending coordinate value.
    """

    code = "out_of_bounds"

    def __init__(self, axis: str, bound: str, limit: float, value: float) -> None:
        self.axis = axis
        self.bound = bound
        self.limit = limit
        self.value = value
        relation = "below minimum" if bound == "min" else "above maximum"
        super().__init__(f"{axis.capitalize()} {value} is {relation} {limit}")


class WrongLength(PinCodecError):
    """Raised when a PIN does not contain exactly 10 symbols after stripping separators."""

    code = "wrong_length"

    def __init__(self, length: int, expected: int = 10) -> None:
        self.length = length
        self.expected = expected
        super().__init__(f"PIN must be {expected} characters (excluding hyphens), got {length}")


class InvalidCharacters(PinCodecError):
    """Raised when a PIN contains characters outside the symbol alphabet.

    ``characters`` lists every offending character once, in order of first
    appearance.
    """

    code = "invalid_characters"

    def __init__(self, characters: list[str]) -> None:
        self.characters = characters
        super().__init__(f"Invalid characters: {', '.join(repr(c) for c in characters)}")


class InvalidSymbol(PinCodecError):
    """Raised when a single character is not a member of the grid alphabet."""

    code = "invalid_symbol"

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Invalid symbol {symbol!r}")
