"""Decodes UXID strings into records.

Decoding mirrors the encoder as a chain of stages over an immutable record:

    separate_prefix -> separate_encoded -> decode_time
        -> decode_size -> decode_rand -> decode_rand_size

The random suffix carries no length or checksum, so the last three stages
mark their fields as unsupported instead of guessing.
"""

from loguru import logger

from uxid.codec.timestamp import unpack_time
from uxid.constants import DELIMITER, TIME_ENCODED_LENGTH
from uxid.enums import DECODE_NOT_SUPPORTED
from uxid.exceptions import BodyTooShortError, EmptyBodyError, InvalidUXIDError
from uxid.models import UXID


def process(record: UXID) -> UXID:
    """Run every decoding stage over a record holding ``string``.

    Raises:
        ParseError: If the string is not a well-formed UXID
    """
    if not isinstance(record.string, str):
        raise InvalidUXIDError(record.string)

    record = separate_prefix(record)
    record = separate_encoded(record)
    record = decode_time(record)
    record = decode_size(record)
    record = decode_rand(record)
    record = decode_rand_size(record)
    logger.trace(f"Decoded UXID {record.string}")
    return record


def separate_prefix(record: UXID) -> UXID:
    """Split ``string`` into ``prefix`` and ``encoded``.

    The last delimiter-separated segment is the body; all earlier segments
    form the prefix, which may itself contain delimiters. The prefix is
    kept verbatim, so ``a__0000000000`` decodes to prefix ``a_`` even though
    the encoder would refuse to generate it; only an empty prefix becomes
    ``None``. Records that already carry a prefix are returned unchanged.
    """
    if record.prefix is not None:
        return record

    prefix, _, encoded = record.string.rpartition(DELIMITER)
    if not encoded:
        raise EmptyBodyError(record.string)
    return record.model_copy(update={"prefix": prefix or None, "encoded": encoded})


def separate_encoded(record: UXID) -> UXID:
    """Split the body into the 10-symbol time and the random suffix."""
    encoded = record.encoded
    if len(encoded) < TIME_ENCODED_LENGTH:
        raise BodyTooShortError(encoded, TIME_ENCODED_LENGTH)
    return record.model_copy(
        update={"time_encoded": encoded[:TIME_ENCODED_LENGTH], "rand_encoded": encoded[TIME_ENCODED_LENGTH:]}
    )


def decode_time(record: UXID) -> UXID:
    """Decode ``time_encoded`` back into the millisecond timestamp."""
    return record.model_copy(update={"time": unpack_time(record.time_encoded)})


def decode_size(record: UXID) -> UXID:
    return record.model_copy(update={"size": DECODE_NOT_SUPPORTED})


def decode_rand(record: UXID) -> UXID:
    return record.model_copy(update={"rand": DECODE_NOT_SUPPORTED})


def decode_rand_size(record: UXID) -> UXID:
    return record.model_copy(update={"rand_size": DECODE_NOT_SUPPORTED})
