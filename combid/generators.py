"""Infinite identifier iterators.

Each next() computes a fresh identifier from the live clock. An error raised
by one call does not end the iterator; the next call tries again.
"""

import random

from combid.encoder import encode_time_only, encode_with_random
from combid.logging import get_logger


class _IdentifierIterator:
    __slots__ = ()

    def __iter__(self):
        return self

    def __next__(self):
        raise NotImplementedError

    def take(self, count):
        """Return the next `count` identifiers as a list."""
        return [next(self) for _ in range(count)]


class CombidGenerator(_IdentifierIterator):
    """Yields combids drawn from a randomness source it owns.

    Without a source it creates a random.SystemRandom, which reads OS entropy
    and is safe to share between threads.
    """

    __slots__ = ("random_source",)

    def __init__(self, random_source=None):
        self.random_source = random_source if random_source is not None else random.SystemRandom()
        get_logger().debug("generator ready", kind="combid", source=type(self.random_source).__name__)

    def __next__(self):
        return encode_with_random(self.random_source)


class TimeIdGenerator(_IdentifierIterator):
    """Yields time-only identifiers."""

    __slots__ = ()

    def __init__(self):
        get_logger().debug("generator ready", kind="timeid")

    def __next__(self):
        return encode_time_only()
