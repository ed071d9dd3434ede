"""Shared fixtures: deterministic clock and random source."""

import pytest

from uxid.service import UXIDService
from uxid.settings import Settings

FIXED_TIME = 1_700_000_000_000  # 2023-11-14T22:13:20Z


class FakeRandom:
    """Random source returning a repeating byte pattern and recording requests."""

    def __init__(self, byte: int = 0xFF):
        self.byte = byte
        self.requests: list[int] = []

    def __call__(self, size: int) -> bytes:
        self.requests.append(size)
        return bytes([self.byte]) * size


@pytest.fixture
def fake_random() -> FakeRandom:
    return FakeRandom()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def service(settings: Settings, fake_random: FakeRandom) -> UXIDService:
    """Service with a pinned clock and predictable random bytes."""
    return UXIDService(settings, clock=lambda: FIXED_TIME, random_source=fake_random)


@pytest.fixture
def fixed_time() -> int:
    return FIXED_TIME
