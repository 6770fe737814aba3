"""Combid - 64-bit time-ordered numeric identifiers."""

__version__ = "0.1.0"

from combid.encoder import (
    encode_time_only,
    encode_with_random,
    pack_combid,
    pack_timeid,
    to_identifier,
)
from combid.errors import ClockError, CombidError, EncodingError
from combid.generators import CombidGenerator, TimeIdGenerator

__all__ = [
    "encode_with_random",
    "encode_time_only",
    "pack_combid",
    "pack_timeid",
    "to_identifier",
    "CombidGenerator",
    "TimeIdGenerator",
    "CombidError",
    "ClockError",
    "EncodingError",
]
