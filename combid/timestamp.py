"""Wall-clock readings for identifier packing and log records."""

import time
from datetime import datetime, timezone

from combid.errors import ClockError

NANOS_PER_SECOND = 1_000_000_000


def now_nanos():
    """Current time in nanoseconds since Unix epoch."""
    return time.time_ns()


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return now_nanos() // 1_000


def epoch_parts(epoch_ns=None):
    """Split a reading into (seconds, sub-second nanoseconds).

    Reads the clock when no value is given. A reading before the epoch
    raises ClockError instead of producing negative parts.
    """
    if epoch_ns is None:
        epoch_ns = now_nanos()
    if epoch_ns < 0:
        raise ClockError("system clock is before the Unix epoch", epoch_nanos=epoch_ns)
    return divmod(epoch_ns, NANOS_PER_SECOND)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
