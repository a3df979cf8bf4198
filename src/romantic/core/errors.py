"""Exceptions raised by the numeral codec.

All of them derive from ValueError, so callers that only care about
"bad input" can catch that alone.
"""


class NumeralError(ValueError):
    """Base class for every codec failure."""


class AlphabetError(NumeralError):
    """A custom alphabet could not be built."""


class NumeralRangeError(NumeralError):
    """An integer falls outside the alphabet's representable range."""

    def __init__(self, value: int, minimum: int, maximum: int):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum < minimum:
            msg = f"Alphabet cannot represent any value, got {value}"
        else:
            msg = f"Value must be {minimum}-{maximum}, got {value}"
        super().__init__(msg)


class UnknownSymbolError(NumeralError):
    """Decode input contains a character outside the alphabet."""

    def __init__(self, symbol: str, position: int | None = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            super().__init__(f"Invalid character {symbol!r}")
        else:
            super().__init__(f"Invalid character {symbol!r} at position {position}")


class MalformedSequenceError(NumeralError):
    """Decode input uses known symbols in an order the grammar rejects."""

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed numeral {text!r} at position {position}: {reason}")


class NumeralOverflowError(NumeralError):
    """Decoded value does not fit the requested integer width."""

    def __init__(self, text: str, bits: int):
        self.text = text
        self.bits = bits
        super().__init__(f"Numeral {text!r} overflows a {bits}-bit signed integer")
