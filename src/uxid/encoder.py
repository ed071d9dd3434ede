"""Assembles UXID records into strings.

Generation runs as a sequence of stages. Each stage takes a record and
returns an updated copy, so stages can be exercised on their own:

    validate_prefix -> resolve_rand_size -> encode_time -> encode_rand
        -> assemble_encoded -> assemble_string

Only ``encode_rand`` has a side effect (it consumes entropy from the random
source it is handed).
"""

from loguru import logger

from uxid.codec import rand as rand_codec
from uxid.codec.timestamp import pack_time
from uxid.constants import DELIMITER
from uxid.enums import SIZE_BYTES, Size
from uxid.exceptions import InvalidPrefixError, InvalidSizeOptionError
from uxid.models import UXID
from uxid.sources import RandomSource, secure_random


def process(
    record: UXID,
    random_source: RandomSource = secure_random,
    default_rand_size: int | None = None,
) -> UXID:
    """Run every encoding stage over a record holding the generation options.

    Args:
        record: Record with ``time`` set and optionally ``prefix``, ``rand_size``, ``size``
        random_source: Callable returning the requested number of random bytes
        default_rand_size: Byte count used when neither rand_size nor size is set

    Returns:
        A fully populated record

    Raises:
        GenerationError: If any option is invalid
    """
    record = validate_prefix(record)
    record = resolve_rand_size(record, default_rand_size)
    record = encode_time(record)
    record = encode_rand(record, random_source)
    record = assemble_encoded(record)
    record = assemble_string(record)
    logger.trace(f"Generated UXID {record.string}")
    return record


def validate_prefix(record: UXID) -> UXID:
    """Reject empty prefixes and prefixes ending with the delimiter.

    Delimiters inside the prefix are allowed; the decoder reassembles
    multi-segment prefixes such as ``multi_word_prefix``.
    """
    prefix = record.prefix
    if prefix is None:
        return record
    if not isinstance(prefix, str):
        raise InvalidPrefixError(prefix, "must be a string")
    if not prefix:
        raise InvalidPrefixError(prefix, "must not be empty")
    if prefix.endswith(DELIMITER):
        raise InvalidPrefixError(prefix, f"must not end with {DELIMITER!r}")
    return record


def resolve_rand_size(record: UXID, default_rand_size: int | None = None) -> UXID:
    """Settle ``rand_size`` and ``size`` into one consistent byte count.

    An explicit ``rand_size`` wins if ``size`` is unset or selects the same
    byte count. When a preset selects exactly ``rand_size`` bytes, ``size`` is
    filled in as well.
    """
    rand_size = record.rand_size
    size = record.size

    if rand_size is not None and (isinstance(rand_size, bool) or not isinstance(rand_size, int) or rand_size <= 0):
        raise InvalidSizeOptionError(f"rand_size must be a positive integer, got {rand_size!r}", rand_size=rand_size)

    preset = None
    if size is not None:
        rand_codec.resolve_size(size)  # raises for unknown presets
        preset = Size(size)

    if rand_size is None and preset is None:
        if default_rand_size is None or default_rand_size <= 0:
            raise InvalidSizeOptionError("Neither rand_size nor size given and no default random size configured")
        rand_size = default_rand_size
    elif rand_size is None:
        rand_size = SIZE_BYTES[preset]
    elif preset is not None and SIZE_BYTES[preset] != rand_size:
        raise InvalidSizeOptionError(
            f"size {preset.value!r} selects {SIZE_BYTES[preset]} bytes but rand_size is {rand_size}",
            size=size,
            rand_size=rand_size,
        )

    if preset is None:
        preset = next((candidate for candidate, count in SIZE_BYTES.items() if count == rand_size), None)

    return record.model_copy(update={"rand_size": rand_size, "size": preset})


def encode_time(record: UXID) -> UXID:
    """Encode ``time`` into the 10-symbol ``time_encoded``."""
    return record.model_copy(update={"time_encoded": pack_time(record.time)})


def encode_rand(record: UXID, random_source: RandomSource = secure_random) -> UXID:
    """Draw ``rand_size`` random bytes and encode them."""
    data = rand_codec.generate_rand(record.rand_size, random_source)
    return record.model_copy(update={"rand": data, "rand_encoded": rand_codec.encode_rand(data)})


def assemble_encoded(record: UXID) -> UXID:
    """Join the encoded time and random suffix into the body."""
    return record.model_copy(update={"encoded": record.time_encoded + record.rand_encoded})


def assemble_string(record: UXID) -> UXID:
    """Prepend the prefix and delimiter, if any, to the body."""
    if record.prefix is None:
        return record.model_copy(update={"string": record.encoded})
    return record.model_copy(update={"string": f"{record.prefix}{DELIMITER}{record.encoded}"})
