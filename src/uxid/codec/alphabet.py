"""Mapping between alphabet symbols and 5-bit values.

Decoding goes through a 128-entry table indexed by character code, so every
lookup is a single index operation. Lowercase letters decode to the same
value as their uppercase form; encoding only ever produces uppercase.
"""

from uxid.constants import ALPHABET
from uxid.exceptions import InvalidSymbolError

_INVALID = -1


def _build_decode_table() -> tuple[int, ...]:
    table = [_INVALID] * 128
    for value, symbol in enumerate(ALPHABET):
        table[ord(symbol)] = value
        table[ord(symbol.lower())] = value
    return tuple(table)


DECODE_TABLE = _build_decode_table()


def encode_symbol(value: int) -> str:
    """Return the symbol for a value in ``range(32)``."""
    if not 0 <= value < len(ALPHABET):
        raise ValueError(f"Symbol value out of range: {value}")
    return ALPHABET[value]


def decode_symbol(symbol: str, position: int | None = None) -> int:
    """Return the 5-bit value of a single symbol.

    Args:
        symbol: One character
        position: Index of the character in the decoded string (for error messages)

    Raises:
        InvalidSymbolError: If the character is not part of the alphabet
    """
    code = ord(symbol) if len(symbol) == 1 else _INVALID
    value = DECODE_TABLE[code] if 0 <= code < len(DECODE_TABLE) else _INVALID
    if value == _INVALID:
        raise InvalidSymbolError(symbol, position)
    return value


def is_valid_symbol(symbol: str) -> bool:
    """Check whether a character decodes to an alphabet value."""
    if len(symbol) != 1:
        return False
    code = ord(symbol)
    return code < len(DECODE_TABLE) and DECODE_TABLE[code] != _INVALID
