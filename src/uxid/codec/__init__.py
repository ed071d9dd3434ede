"""Bit-level codecs for UXID timestamps and random suffixes."""

from uxid.codec.alphabet import decode_symbol, encode_symbol, is_valid_symbol
from uxid.codec.rand import encode_rand, generate_rand, resolve_size
from uxid.codec.timestamp import pack_time, unpack_time

__all__ = [
    "decode_symbol",
    "encode_symbol",
    "is_valid_symbol",
    "encode_rand",
    "generate_rand",
    "resolve_size",
    "pack_time",
    "unpack_time",
]
