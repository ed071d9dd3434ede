"""Tests for random suffix generation and encoding."""

import base64
import math
import os

import pytest

from uxid.codec.rand import encode_rand, generate_rand, resolve_size
from uxid.constants import ALPHABET
from uxid.enums import Size
from uxid.exceptions import InvalidSizeOptionError

# RFC 4648 base32 uses the same 5-bit grouping with a different alphabet
_RFC4648 = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", ALPHABET)


def _reference_encode(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip("=").translate(_RFC4648)


class TestEncodeRand:
    """Tests for encode_rand."""

    def test_empty(self):
        assert encode_rand(b"") == ""

    def test_known_values(self):
        assert encode_rand(b"\x00") == "00"
        assert encode_rand(b"\xff") == "ZW"  # 11111 111(00)
        assert encode_rand(b"\xff" * 5) == "ZZZZZZZZ"

    @pytest.mark.parametrize("size", range(1, 21))
    def test_length(self, size):
        assert len(encode_rand(os.urandom(size))) == math.ceil(size * 8 / 5)

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6, 8, 10, 16])
    def test_matches_base32_grouping(self, size):
        data = os.urandom(size)
        assert encode_rand(data) == _reference_encode(data)

    def test_alphabet_closure(self):
        encoded = encode_rand(os.urandom(64))
        assert set(encoded) <= set(ALPHABET)


class TestGenerateRand:
    """Tests for generate_rand."""

    def test_uses_source(self):
        requested = []

        def source(size):
            requested.append(size)
            return b"\x01" * size

        assert generate_rand(4, source) == b"\x01\x01\x01\x01"
        assert requested == [4]

    def test_short_source_is_rejected(self):
        with pytest.raises(ValueError):
            generate_rand(4, lambda size: b"\x00")


class TestResolveSize:
    """Tests for size preset resolution."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (Size.XSMALL, 2),
            ("small", 4),
            ("m", 6),
            ("L", 8),
            ("XLARGE", 10),
            ("xl", 10),
        ],
    )
    def test_presets(self, size, expected):
        assert resolve_size(size) == expected

    @pytest.mark.parametrize("size", ["huge", "", 10, None])
    def test_unknown_preset(self, size):
        with pytest.raises(InvalidSizeOptionError):
            resolve_size(size)
