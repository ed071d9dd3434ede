"""The UXID record.

A record describes one identifier in all its decomposed forms at once. It is
immutable: encoder and decoder stages return updated copies instead of
mutating the record they receive.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict

from .enums import Size, Unsupported

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)


class UXID(BaseModel):
    """A generated or decoded UXID.

    After decoding, ``rand``, ``rand_size`` and ``size`` hold
    ``Unsupported.DECODE_NOT_SUPPORTED`` because they cannot be recovered from
    the string.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str | None = None
    time: int | None = None
    time_encoded: str | None = None
    rand: bytes | Unsupported | None = None
    rand_size: int | Unsupported | None = None
    rand_encoded: str | None = None
    size: Size | Unsupported | None = None
    encoded: str | None = None
    string: str | None = None

    @property
    def datetime(self) -> dt.datetime | None:
        """Timestamp as an aware UTC datetime.

        Raises:
            OverflowError: If the timestamp lies beyond year 9999
        """
        if self.time is None:
            return None
        return EPOCH + dt.timedelta(milliseconds=self.time)

    def __str__(self) -> str:
        return self.string or ""
