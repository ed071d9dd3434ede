"""Enums for UXID records and options."""

from enum import StrEnum


class Size(StrEnum):
    """Named presets selecting the number of random bytes."""

    XSMALL = "xsmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"

    @classmethod
    def _missing_(cls, value):
        # Accept short aliases ("xs", "m", ...) and any casing
        if isinstance(value, str):
            lowered = value.lower()
            alias = SIZE_ALIASES.get(lowered, lowered)
            for member in cls:
                if member.value == alias:
                    return member
        return None


SIZE_ALIASES = {
    "xs": Size.XSMALL.value,
    "s": Size.SMALL.value,
    "m": Size.MEDIUM.value,
    "l": Size.LARGE.value,
    "xl": Size.XLARGE.value,
}

# Random bytes per preset
SIZE_BYTES: dict[Size, int] = {
    Size.XSMALL: 2,
    Size.SMALL: 4,
    Size.MEDIUM: 6,
    Size.LARGE: 8,
    Size.XLARGE: 10,
}


class Unsupported(StrEnum):
    """Marker for record fields that cannot be recovered from a string."""

    DECODE_NOT_SUPPORTED = "decode_not_supported"


DECODE_NOT_SUPPORTED = Unsupported.DECODE_NOT_SUPPORTED
