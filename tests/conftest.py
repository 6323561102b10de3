from datetime import datetime, timezone

import pytest

import timeshift
from timeshift.core.clock import ManualClock
from timeshift.core.engine import TimeEngine
from timeshift.core.state import Affinity

REAL_START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Real clock that only moves on advance()."""
    return ManualClock(start=REAL_START, monotonic=500.0)


@pytest.fixture
def engine(clock):
    return TimeEngine(clock=clock)


@pytest.fixture
def default_engine(clock):
    """The module-level engine bound to a manual clock, restored afterwards."""
    eng = timeshift.get_engine()
    original_clock = eng.clock
    eng.clock = clock
    eng.thread_affinity = Affinity.SHARED
    yield eng
    eng.unmock()
    eng.clock = original_clock
    eng.safe_mode = False
    eng.mock_monotonic = False
    eng.thread_affinity = Affinity.SHARED
