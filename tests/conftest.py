"""Shared fixtures for loopbench tests."""

from io import StringIO

import pytest

from loopbench.benchmarks.runner import NS_PER_MS
from loopbench.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output():
    """Configure logging into a buffer so scenario and suite code can log."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    yield output
    Logger._configured = False


def make_clock(durations_ms):
    """Build a clock whose consecutive start/end pairs span the given durations."""
    ticks = []
    now = 0
    for duration in durations_ms:
        ticks.append(now)
        now += int(duration * NS_PER_MS)
        ticks.append(now)
        now += 1
    return iter(ticks).__next__


@pytest.fixture
def fake_clock():
    """Factory for deterministic clocks, see make_clock()."""
    return make_clock
