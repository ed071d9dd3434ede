"""Exceptions raised while generating, parsing or casting UXIDs.

Every error derives from ``UXIDError`` (itself a ``ValueError``), so callers
can catch the whole family at once or pick out the generation and parsing
branches individually. Errors keep the offending value as an attribute.
"""

from typing import Any


class UXIDError(ValueError):
    """Base class for all UXID errors."""


class GenerationError(UXIDError):
    """Raised when a UXID cannot be generated from the given options."""


class InvalidPrefixError(GenerationError):
    """Raised when a prefix is empty or ends with the delimiter."""

    def __init__(self, prefix: Any, reason: str):
        self.prefix = prefix
        self.reason = reason
        super().__init__(f"Invalid prefix {prefix!r}: {reason}")


class InvalidSizeOptionError(GenerationError):
    """Raised when rand_size and size are missing, invalid or in conflict."""

    def __init__(self, message: str, *, size: Any = None, rand_size: Any = None):
        self.size = size
        self.rand_size = rand_size
        super().__init__(message)


class InvalidTimeError(GenerationError):
    """Raised when a timestamp does not fit in 48 unsigned bits."""

    def __init__(self, time: Any):
        self.time = time
        super().__init__(f"Invalid time {time!r}: must be an integer between 0 and 2**48 - 1 milliseconds")


class ParseError(UXIDError):
    """Raised when a string cannot be decoded as a UXID."""


class InvalidUXIDError(ParseError):
    """Raised when the value to decode is not a string at all."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot decode {type(value).__name__} as UXID: expected str")


class EmptyBodyError(ParseError):
    """Raised when nothing follows the last delimiter."""

    def __init__(self, string: str):
        self.string = string
        super().__init__(f"UXID {string!r} has an empty body")


class BodyTooShortError(ParseError):
    """Raised when the body is shorter than the encoded timestamp."""

    def __init__(self, encoded: str, minimum: int):
        self.encoded = encoded
        self.minimum = minimum
        super().__init__(f"UXID body {encoded!r} is too short: expected at least {minimum} characters, got {len(encoded)}")


class InvalidSymbolError(ParseError):
    """Raised when a character is not part of the alphabet."""

    def __init__(self, symbol: str, position: int | None = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid symbol {symbol!r}{where}")


class CastError(UXIDError):
    """Raised when a value cannot be cast to a UXID column value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot cast {type(value).__name__} to UXID: expected str, bytes or None")
