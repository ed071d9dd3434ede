"""Clock and random source capabilities.

The encoder never reads the system clock or entropy pool directly; both are
passed in so tests can substitute deterministic fakes.
"""

import secrets
from collections.abc import Callable

import arrow

Clock = Callable[[], int]
RandomSource = Callable[[int], bytes]


def system_clock() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return int(arrow.utcnow().float_timestamp * 1000)


def secure_random(size: int) -> bytes:
    """Return ``size`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(size)
