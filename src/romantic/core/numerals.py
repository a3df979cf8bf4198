"""Roman-style numerals over an arbitrary ordered alphabet.

Default alphabet: I V X L C D M
Symbol values come from position alone. Even indices are units worth
10^(i/2), odd indices are fives worth 5 * 10^((i-1)/2):

    index   0  1   2   3    4    5     6     7 ...
    value   1  5  10  50  100  500  1000  5000 ...

A unit and the five above it form one tier (one decimal digit). A unit
may prefix the five of its own tier or the unit of the next tier to
subtract itself (IV, IX, XL, XC, CD, CM). Units repeat at most 3 times.
"""

import logging
from dataclasses import dataclass, field

from .errors import (
    AlphabetError,
    MalformedSequenceError,
    NumeralError,
    NumeralOverflowError,
    NumeralRangeError,
    UnknownSymbolError,
)

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "IVXLCDM"
MAX_REPEAT = 3  # consecutive copies of one symbol


def symbol_value(index: int) -> int:
    """Return the value of the symbol at ``index`` in any alphabet."""
    if index < 0:
        raise ValueError(f"Symbol index must be >= 0, got {index}")
    magnitude = 10 ** (index // 2)
    return magnitude * 5 if index % 2 else magnitude


def is_subtractive_pair(smaller: int, larger: int) -> bool:
    """True if the symbol at index ``smaller`` may prefix the one at ``larger``.

    Only a unit may subtract, and only from the next one or two positions:
    I before V/X, X before L/C, C before D/M, and so on up the alphabet.
    """
    return smaller % 2 == 0 and larger - smaller in (1, 2)


def max_value(length: int) -> int:
    """Largest integer an alphabet of ``length`` symbols can encode.

    The top tier's digit reaches 3 when the last symbol is a unit (MMM)
    and 8 when it is a five (VIII); every lower tier reaches 9.
    """
    if length <= 0:
        return 0
    top = length - 1
    magnitude = 10 ** (top // 2)
    return (9 if top % 2 else 4) * magnitude - 1


@dataclass(frozen=True)
class Numerals:
    """An immutable numeral system built from an ordered alphabet.

    Numerals("AB") gives A=1, B=5; Numerals() is the classical I..M set.
    """
    symbols: tuple[str, ...] = DEFAULT_ALPHABET
    _index: dict[str, int] = field(init=False, repr=False, compare=False)
    _table: tuple[tuple[str, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        symbols = tuple(self.symbols)
        index = {}
        for i, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise AlphabetError(
                    f"Symbols must be single characters, got {symbol!r} at index {i}")
            if symbol in index:
                raise AlphabetError(
                    f"Duplicate symbol {symbol!r} at indices {index[symbol]} and {i}")
            index[symbol] = i

        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_table", _greedy_table(symbols))
        logger.debug("Built %d-symbol alphabet %r, range 1-%d",
                     len(symbols), "".join(symbols), self.maximum)

    @classmethod
    def default(cls) -> "Numerals":
        return cls(DEFAULT_ALPHABET)

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def minimum(self) -> int:
        return 1

    @property
    def maximum(self) -> int:
        return max_value(len(self.symbols))

    def value_of(self, symbol: str) -> int:
        """Return the value of a single symbol in this alphabet."""
        index = self._index.get(symbol)
        if index is None:
            raise UnknownSymbolError(symbol)
        return symbol_value(index)

    def table(self) -> tuple[tuple[str, int], ...]:
        """Return (glyphs, value) entries used by encode, largest first."""
        return self._table

    def encode(self, value: int) -> str:
        """Encode a positive integer as a numeral string."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Value must be an int, got {type(value).__name__}")
        if not self.minimum <= value <= self.maximum:
            raise NumeralRangeError(value, self.minimum, self.maximum)

        parts = []
        remaining = value
        for glyphs, amount in self._table:
            count, remaining = divmod(remaining, amount)
            parts.append(glyphs * count)
            if not remaining:
                break
        return "".join(parts)

    def decode(self, text: str, bits: int | None = None) -> int:
        """Decode a numeral string to an integer.

        Only canonical numerals (the ones encode produces) are accepted.
        With ``bits`` set, the result must fit a signed integer of that
        width; without it Python ints never overflow.
        """
        if not isinstance(text, str):
            raise TypeError(f"Text must be a str, got {type(text).__name__}")
        if bits is not None and bits < 1:
            raise ValueError(f"bits must be >= 1, got {bits}")
        limit = None if bits is None else 2 ** (bits - 1) - 1

        indices = []
        for position, char in enumerate(text):
            index = self._index.get(char)
            if index is None:
                raise UnknownSymbolError(char, position)
            indices.append(index)
        if not indices:
            raise MalformedSequenceError(text, 0, "empty numeral")

        total = 0
        ceiling = None   # largest group allowed at the current position
        previous = None  # last single symbol, for the repeat count
        run = 0
        position = 0
        while position < len(indices):
            index = indices[position]
            following = indices[position + 1] if position + 1 < len(indices) else None

            if following is not None and is_subtractive_pair(index, following):
                width = 2
                amount = symbol_value(following) - symbol_value(index)
            else:
                width = 1
                amount = symbol_value(index)

            if ceiling is not None and amount > ceiling:
                group = text[position:position + width]
                raise MalformedSequenceError(
                    text, position, f"{group!r} cannot follow a smaller group")

            unit = 10 ** (index // 2)
            if width == 2:
                ceiling = unit - 1
                previous = None
                run = 0
            else:
                ceiling = unit
                run = run + 1 if index == previous else 1
                previous = index
                if run > MAX_REPEAT:
                    raise MalformedSequenceError(
                        text, position,
                        f"{text[position]!r} repeats more than {MAX_REPEAT} times")

            total += amount
            if limit is not None and total > limit:
                raise NumeralOverflowError(text, bits)
            position += width

        return total

    def is_valid(self, text: str) -> bool:
        """True if ``text`` decodes in this alphabet."""
        try:
            self.decode(text)
        except NumeralError:
            return False
        return True


def _greedy_table(symbols):
    entries = []
    for i, symbol in enumerate(symbols):
        value = symbol_value(i)
        entries.append((symbol, value))
        for prefix in (i - 1, i - 2):
            if prefix >= 0 and is_subtractive_pair(prefix, i):
                entries.append((symbols[prefix] + symbol, value - symbol_value(prefix)))
    entries.sort(key=lambda entry: entry[1], reverse=True)
    return tuple(entries)


DEFAULT = Numerals.default()


def encode(value: int) -> str:
    """Encode ``value`` with the default I..M alphabet."""
    return DEFAULT.encode(value)


def decode(text: str, bits: int | None = None) -> int:
    """Decode ``text`` with the default I..M alphabet."""
    return DEFAULT.decode(text, bits)
