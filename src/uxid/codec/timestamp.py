"""Fixed-width timestamp codec.

A 48-bit millisecond timestamp is split most-significant-first into a 3-bit
leading group followed by nine 5-bit groups, and each group becomes one
alphabet symbol. The result is always 10 symbols long, so identifiers sort
lexicographically by time.
"""

from uxid.codec.alphabet import decode_symbol, encode_symbol
from uxid.constants import MAX_TIME, SYMBOL_BITS, TIME_BITS, TIME_ENCODED_LENGTH, TIME_LEAD_BITS
from uxid.exceptions import InvalidSymbolError, InvalidTimeError

_SYMBOL_MASK = (1 << SYMBOL_BITS) - 1
_LEAD_MAX = (1 << TIME_LEAD_BITS) - 1


def pack_time(time: int) -> str:
    """Encode a millisecond timestamp into exactly 10 symbols.

    Args:
        time: Milliseconds since the Unix epoch, between 0 and 2**48 - 1

    Returns:
        The encoded timestamp

    Raises:
        InvalidTimeError: If the value is not an int or does not fit in 48 bits
    """
    if isinstance(time, bool) or not isinstance(time, int) or not 0 <= time <= MAX_TIME:
        raise InvalidTimeError(time)

    symbols = [encode_symbol(time >> (TIME_BITS - TIME_LEAD_BITS))]
    for shift in range(TIME_BITS - TIME_LEAD_BITS - SYMBOL_BITS, -1, -SYMBOL_BITS):
        symbols.append(encode_symbol((time >> shift) & _SYMBOL_MASK))
    return "".join(symbols)


def unpack_time(time_encoded: str) -> int:
    """Decode 10 symbols back into the 48-bit timestamp.

    Raises:
        InvalidSymbolError: If a character is outside the alphabet, or the
            leading character holds a value that does not fit in 3 bits
        ValueError: If the input is not exactly 10 characters long
    """
    if len(time_encoded) != TIME_ENCODED_LENGTH:
        raise ValueError(f"Encoded time must be {TIME_ENCODED_LENGTH} characters, got {len(time_encoded)}")

    lead = decode_symbol(time_encoded[0], 0)
    if lead > _LEAD_MAX:
        raise InvalidSymbolError(time_encoded[0], 0)

    time = lead
    for position, symbol in enumerate(time_encoded[1:], start=1):
        time = (time << SYMBOL_BITS) | decode_symbol(symbol, position)
    return time
