"""Tests for the UXID record model."""

from datetime import UTC, datetime

import pytest

from uxid import DECODE_NOT_SUPPORTED, UXID, Size


def test_empty_record():
    record = UXID()
    assert record.string is None
    assert record.datetime is None
    assert str(record) == ""


def test_datetime_keeps_milliseconds():
    record = UXID(time=1_700_000_000_123)
    assert record.datetime == datetime(2023, 11, 14, 22, 13, 20, 123_000, tzinfo=UTC)


def test_datetime_beyond_year_9999():
    with pytest.raises(OverflowError):
        _ = UXID(time=2**48 - 1).datetime


def test_accepts_sentinel_values():
    record = UXID(rand=DECODE_NOT_SUPPORTED, rand_size=DECODE_NOT_SUPPORTED, size=DECODE_NOT_SUPPORTED)
    assert record.rand == DECODE_NOT_SUPPORTED
    assert record.rand_size == DECODE_NOT_SUPPORTED
    assert record.size == DECODE_NOT_SUPPORTED


def test_accepts_generation_values():
    record = UXID(rand=b"\x00\x01", rand_size=2, size=Size.XSMALL)
    assert record.rand == b"\x00\x01"
    assert record.rand_size == 2
    assert record.size is Size.XSMALL


def test_frozen():
    record = UXID(prefix="usr")
    with pytest.raises(ValueError):
        record.prefix = "grp"
