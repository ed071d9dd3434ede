"""User eXperience focused IDentifiers.

UXIDs are prefixed, time-sortable, copy/paste friendly identifiers such as
``usr_01HF3NZ4Q8K2X7M5TP9R0WBVE6``: an optional prefix, a 10-symbol encoded
millisecond timestamp and an encoded random suffix.
"""

from loguru import logger

from .enums import DECODE_NOT_SUPPORTED, Size, Unsupported
from .exceptions import (
    BodyTooShortError,
    CastError,
    EmptyBodyError,
    GenerationError,
    InvalidPrefixError,
    InvalidSizeOptionError,
    InvalidSymbolError,
    InvalidTimeError,
    InvalidUXIDError,
    ParseError,
    UXIDError,
)
from .models import UXID
from .service import UXIDService, decode, generate, generate_unchecked, get_uxid_service, new
from .settings import Settings, get_settings

# Library logging stays silent until the application enables it
logger.disable(__name__)

__all__ = [
    "UXID",
    "UXIDService",
    "Size",
    "Unsupported",
    "DECODE_NOT_SUPPORTED",
    "Settings",
    "get_settings",
    "get_uxid_service",
    "new",
    "generate",
    "generate_unchecked",
    "decode",
    "UXIDError",
    "GenerationError",
    "InvalidPrefixError",
    "InvalidSizeOptionError",
    "InvalidTimeError",
    "ParseError",
    "InvalidUXIDError",
    "EmptyBodyError",
    "BodyTooShortError",
    "InvalidSymbolError",
    "CastError",
]
