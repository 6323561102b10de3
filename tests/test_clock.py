from datetime import datetime, timedelta, timezone

from timeshift.core.clock import ManualClock, SystemClock


def test_system_clock_is_utc_and_current():
    now = SystemClock().now()
    assert now.tzinfo == timezone.utc
    assert abs(datetime.now(timezone.utc) - now) < timedelta(seconds=1)


def test_system_monotonic_never_goes_back():
    clock = SystemClock()
    first = clock.monotonic()
    assert clock.monotonic() >= first


def test_manual_clock_advance_and_reset():
    start = datetime(2020, 2, 2, tzinfo=timezone.utc)
    clock = ManualClock(start=start, monotonic=10.0)
    clock.advance(2.5)
    assert clock.now() == start + timedelta(seconds=2.5)
    assert clock.monotonic() == 12.5
    clock.reset()
    assert clock.now() == start
    assert clock.monotonic() == 10.0


def test_manual_clock_set_keeps_monotonic():
    clock = ManualClock(monotonic=3.0)
    clock.set(datetime(2021, 1, 1))
    assert clock.now() == datetime(2021, 1, 1, tzinfo=timezone.utc)
    assert clock.monotonic() == 3.0
