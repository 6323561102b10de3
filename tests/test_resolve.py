from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from timeshift.core.errors import InvalidTimeSpecError
from timeshift.core.resolve import resolve_factor, resolve_time

REAL_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_no_argument_is_real_now():
    assert resolve_time((), REAL_NOW) == REAL_NOW


def test_naive_datetime_is_read_as_utc():
    result = resolve_time((datetime(2025, 3, 4, 5, 6, 7),), REAL_NOW)
    assert result == datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


def test_aware_datetime_is_converted_to_utc():
    plus_two = timezone(timedelta(hours=2))
    result = resolve_time((datetime(2025, 3, 4, 10, 0, tzinfo=plus_two),), REAL_NOW)
    assert result == datetime(2025, 3, 4, 8, 0, tzinfo=timezone.utc)
    assert result.tzinfo == timezone.utc


def test_date_resolves_to_midnight():
    result = resolve_time((date(2025, 12, 25),), REAL_NOW)
    assert result == datetime(2025, 12, 25, 0, 0, tzinfo=timezone.utc)


def test_numeric_value_is_offset_from_real_now():
    assert resolve_time((3600,), REAL_NOW) == REAL_NOW + timedelta(hours=1)
    assert resolve_time((-1.5,), REAL_NOW) == REAL_NOW - timedelta(seconds=1.5)
    assert resolve_time((np.float64(30),), REAL_NOW) == REAL_NOW + timedelta(seconds=30)


def test_timedelta_is_offset_from_real_now():
    assert resolve_time((timedelta(days=2),), REAL_NOW) == REAL_NOW + timedelta(days=2)
    assert resolve_time((pd.Timedelta(minutes=5),), REAL_NOW) == REAL_NOW + timedelta(minutes=5)


def test_string_is_parsed():
    result = resolve_time(("2025-07-04T09:30:00",), REAL_NOW)
    assert result == datetime(2025, 7, 4, 9, 30, tzinfo=timezone.utc)


def test_string_with_offset_is_converted():
    result = resolve_time(("2025-07-04T09:30:00-04:00",), REAL_NOW)
    assert result == datetime(2025, 7, 4, 13, 30, tzinfo=timezone.utc)


def test_pandas_and_numpy_instants():
    ts = pd.Timestamp("2025-01-02 03:04:05")
    assert resolve_time((ts,), REAL_NOW) == datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    dt64 = np.datetime64("2025-01-02T03:04:05")
    assert resolve_time((dt64,), REAL_NOW) == datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_components():
    assert resolve_time((2008, 10, 5), REAL_NOW) == datetime(2008, 10, 5, tzinfo=timezone.utc)
    assert resolve_time((2008, 10, 5, 14, 30, 15), REAL_NOW) == datetime(
        2008, 10, 5, 14, 30, 15, tzinfo=timezone.utc
    )
    assert resolve_time((2008, 10), REAL_NOW) == datetime(2008, 10, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("spec", [
    (True,),
    (None,),
    ("not a time",),
    (float("nan"),),
    (float("inf"),),
    (pd.NaT,),
    ([2024, 1, 1],),
    (2024, 13, 1),
    (2024, 1, 1.5),
    (2024, 1, 1, 0, 0, 0, 0, 0),
    (1e15,),
    (-1e15,),
    (timedelta.max,),
    (np.float64(9e18),),
])
def test_invalid_specs(spec):
    with pytest.raises(InvalidTimeSpecError):
        resolve_time(spec, REAL_NOW)


def test_invalid_spec_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_time((object(),), REAL_NOW)


def test_factor():
    assert resolve_factor(None) == 1.0
    assert resolve_factor(2) == 2.0
    assert resolve_factor(np.float32(0.5)) == 0.5
    for bad in (True, "2", float("nan"), float("-inf")):
        with pytest.raises(InvalidTimeSpecError):
            resolve_factor(bad)
