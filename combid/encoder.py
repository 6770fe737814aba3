"""
Combid - Combined Identifier.

Time-ordered 64-bit integer IDs without coordination.
Format: 4 bytes seconds + 1 byte nanoseconds + 3 bytes random, read as a
big-endian signed 64-bit integer. The time-only variant spends all 4 trailing
bytes on nanoseconds instead.

Only the low 32 bits of the second count survive, so ordering wraps every
~136 years and flips sign at second 2**31. Both are kept as-is for layout
compatibility.
"""

import struct

from combid.errors import EncodingError
from combid.timestamp import epoch_parts

ID_SIZE = 8
RANDOM_BITS = 32


def _pack(fmt, field, value):
    try:
        return struct.pack(fmt, value)
    except struct.error as exc:
        raise EncodingError(f"cannot encode {field}", field=field, value=value, cause=exc) from exc


def pack_combid(seconds, nanos, random_word):
    """Assemble the 8-byte buffer for a random-backed combid."""
    sec_bytes = _pack(">Q", "seconds", seconds)
    nsec_bytes = _pack(">I", "nanos", nanos)
    rand_bytes = _pack(">I", "random_word", random_word)

    # low half of seconds | top nanos byte | top 3 random bytes
    return sec_bytes[4:] + nsec_bytes[:1] + rand_bytes[:3]


def pack_timeid(seconds, nanos):
    """Assemble the 8-byte buffer for a time-only identifier."""
    sec_bytes = _pack(">Q", "seconds", seconds)
    nsec_bytes = _pack(">I", "nanos", nanos)
    return sec_bytes[4:] + nsec_bytes


def to_identifier(buf):
    """Read an 8-byte buffer as a big-endian signed 64-bit integer."""
    try:
        (value,) = struct.unpack(">q", buf)
    except struct.error as exc:
        raise EncodingError(f"identifier buffer must be {ID_SIZE} bytes",
                            field="buffer", value=bytes(buf), cause=exc) from exc
    return value


def encode_with_random(random_source):
    """Generate a combid from the clock and one 32-bit draw of random_source.

    random_source is anything with getrandbits(k), e.g. random.Random or
    random.SystemRandom. It is only used for the duration of the call.

    Raises ClockError if the clock is before the epoch and EncodingError if
    a component does not fit its field.
    """
    seconds, nanos = epoch_parts()
    random_word = random_source.getrandbits(RANDOM_BITS)
    return to_identifier(pack_combid(seconds, nanos, random_word))


def encode_time_only():
    """Generate an identifier from the clock alone."""
    seconds, nanos = epoch_parts()
    return to_identifier(pack_timeid(seconds, nanos))
