"""Random suffix generation and encoding.

Bytes are read as one big-endian bit string and cut into 5-bit groups; the
final partial group is zero-extended on the low bits, as base32 does. There
is no decoder: the suffix length alone does not tell how many bytes were
drawn.
"""

from uxid.codec.alphabet import encode_symbol
from uxid.constants import SYMBOL_BITS
from uxid.enums import SIZE_BYTES, Size
from uxid.exceptions import InvalidSizeOptionError
from uxid.sources import RandomSource


def resolve_size(size: Size | str) -> int:
    """Return the random byte count for a preset name or alias.

    Raises:
        InvalidSizeOptionError: If the preset is unknown
    """
    try:
        preset = Size(size)
    except ValueError:
        raise InvalidSizeOptionError(f"Unknown size preset: {size!r}", size=size) from None
    return SIZE_BYTES[preset]


def generate_rand(rand_size: int, random_source: RandomSource) -> bytes:
    """Draw ``rand_size`` bytes from the given source.

    Raises:
        ValueError: If the source returns the wrong number of bytes
    """
    data = random_source(rand_size)
    if len(data) != rand_size:
        raise ValueError(f"Random source returned {len(data)} bytes, expected {rand_size}")
    return data


def encode_rand(data: bytes) -> str:
    """Encode bytes into ``ceil(len(data) * 8 / 5)`` symbols."""
    if not data:
        return ""

    total_bits = len(data) * 8
    length = -(-total_bits // SYMBOL_BITS)
    # Left-align the bit string so the last group is padded with zeros
    value = int.from_bytes(data, byteorder="big") << (length * SYMBOL_BITS - total_bits)

    mask = (1 << SYMBOL_BITS) - 1
    symbols = [encode_symbol((value >> (SYMBOL_BITS * index)) & mask) for index in range(length - 1, -1, -1)]
    return "".join(symbols)
