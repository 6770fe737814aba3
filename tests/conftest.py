"""Pytest fixtures for all tests."""

import random

import pytest

from combid import timestamp
from combid.logging import StructuredLogger

# 0x0000000157596771 s + 0x12345678 ns
FIXED_SECONDS = 0x0000000157596771
FIXED_NANOS = 0x12345678
FIXED_READING = FIXED_SECONDS * timestamp.NANOS_PER_SECOND + FIXED_NANOS
FIXED_WORD = 0xAABBCCDD


class FixedRandom:
    """Random source that always returns the same word."""

    def __init__(self, word):
        self.word = word
        self.calls = 0

    def getrandbits(self, k):
        self.calls += 1
        return self.word


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    """Random source returning 0xAABBCCDD."""
    return FixedRandom(FIXED_WORD)


@pytest.fixture
def clock(monkeypatch):
    """Replace the clock with a sequence of nanosecond readings."""
    def set_readings(*readings):
        values = iter(readings)
        monkeypatch.setattr(timestamp, "now_nanos", lambda: next(values))
    return set_readings


@pytest.fixture
def reset_logger():
    """Restore the default logger after the test."""
    yield
    StructuredLogger.configure()
