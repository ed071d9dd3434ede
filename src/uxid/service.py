"""Public UXID generation and decoding surface."""

from functools import lru_cache

from loguru import logger

from uxid import decoder, encoder
from uxid.enums import SIZE_BYTES, Size
from uxid.exceptions import UXIDError
from uxid.models import UXID
from uxid.settings import Settings, get_settings
from uxid.sources import Clock, RandomSource, secure_random, system_clock


class UXIDService:
    """Generates and decodes UXIDs.

    The clock and random source are injectable so callers (and tests) can
    pin timestamps and random bytes. Defaults are the system clock and the
    operating system CSPRNG.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ):
        self.settings = settings or get_settings()
        self.clock = clock or system_clock
        self.random_source = random_source or secure_random

    @property
    def default_rand_size(self) -> int:
        """Random bytes used when a call names neither rand_size nor size."""
        if self.settings.default_size is not None:
            return SIZE_BYTES[self.settings.default_size]
        return self.settings.default_rand_size

    def new(
        self,
        *,
        time: int | None = None,
        prefix: str | None = None,
        rand_size: int | None = None,
        size: Size | str | None = None,
    ) -> UXID:
        """Generate a UXID and return the full record.

        Args:
            time: Milliseconds since the Unix epoch (defaults to now)
            prefix: Optional human-readable tag, e.g. ``"usr"``
            rand_size: Number of random bytes
            size: Named preset selecting the number of random bytes

        Raises:
            GenerationError: If the options are invalid
        """
        # Raw options go in unvalidated; the encoder stages do the checking
        record = UXID.model_construct(
            prefix=prefix,
            rand_size=rand_size,
            size=size,
            time=self.clock() if time is None else time,
        )
        return encoder.process(record, self.random_source, self.default_rand_size)

    def generate(self, **opts) -> str:
        """Generate a UXID string.

        Accepts the same keyword options as ``new``.

        Raises:
            GenerationError: If the options are invalid
        """
        return self.new(**opts).string

    def generate_unchecked(self, **opts) -> str:
        """Generate a UXID string, treating any failure as a programming error.

        Raises:
            RuntimeError: Chained from the underlying ``UXIDError``
        """
        try:
            return self.generate(**opts)
        except UXIDError as e:
            logger.error(f"UXID generation failed: {e}")
            raise RuntimeError(f"UXID generation failed: {e}") from e

    def decode(self, string: str) -> UXID:
        """Decode a UXID string into a record.

        ``rand``, ``rand_size`` and ``size`` of the result are always
        ``DECODE_NOT_SUPPORTED``.

        Raises:
            ParseError: If the string is not a well-formed UXID
        """
        return decoder.process(UXID.model_construct(string=string))


@lru_cache
def get_uxid_service() -> UXIDService:
    """Return the process-wide default ``UXIDService``."""
    return UXIDService(get_settings())


def new(**opts) -> UXID:
    """Generate a UXID record with the default service."""
    return get_uxid_service().new(**opts)


def generate(**opts) -> str:
    """Generate a UXID string with the default service."""
    return get_uxid_service().generate(**opts)


def generate_unchecked(**opts) -> str:
    """Generate a UXID string with the default service, raising RuntimeError on failure."""
    return get_uxid_service().generate_unchecked(**opts)


def decode(string: str) -> UXID:
    """Decode a UXID string with the default service."""
    return get_uxid_service().decode(string)
