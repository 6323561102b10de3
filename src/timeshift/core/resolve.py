"""Turns the arguments of freeze/travel/scale into a concrete UTC instant.

Accepted forms:
  freeze()                         real now
  freeze(datetime(2024, 1, 1, 9))  naive values are read as UTC
  freeze(date(2024, 1, 1))         midnight UTC of that day
  freeze("2024-01-01T09:30")       parsed with pandas
  freeze(np.datetime64(...))
  freeze(3600)                     offset in seconds from real now
  freeze(timedelta(hours=1))       offset from real now
  freeze(2024, 1, 1, 9, 30)        datetime components
"""

from __future__ import annotations

import math
import numbers
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd

from timeshift.core.errors import InvalidTimeSpecError

_MAX_COMPONENTS = 7


def resolve_time(spec: tuple[object, ...], real_now: datetime) -> datetime:
    """Resolve a time spec against ``real_now``. Always returns an aware UTC datetime."""
    if not spec:
        return real_now

    if len(spec) > 1:
        return _from_components(spec)

    value = spec[0]
    if isinstance(value, datetime):
        if value is pd.NaT:
            raise InvalidTimeSpecError("NaT is not a valid time")
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (str, np.datetime64)):
        return _parse(value)
    if isinstance(value, timedelta):
        return _offset(real_now, value)
    if _is_real(value):
        seconds = float(value)  # type: ignore[arg-type]
        if not math.isfinite(seconds):
            raise InvalidTimeSpecError(f"Offset must be finite, got {value!r}")
        try:
            delta = timedelta(seconds=seconds)
        except OverflowError as exc:
            raise InvalidTimeSpecError(f"Offset out of range: {value!r}") from exc
        return _offset(real_now, delta)

    raise InvalidTimeSpecError(f"Cannot resolve a time from {value!r}")


def resolve_factor(factor: object) -> float:
    if factor is None:
        return 1.0
    if not _is_real(factor):
        raise InvalidTimeSpecError(f"Scale factor must be a number, got {factor!r}")
    value = float(factor)  # type: ignore[arg-type]
    if not math.isfinite(value):
        raise InvalidTimeSpecError(f"Scale factor must be finite, got {factor!r}")
    return value


def _is_real(value: object) -> bool:
    # numpy scalars register with numbers.Real; bool is excluded explicitly
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_utc(value: datetime) -> datetime:
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse(value: str | np.datetime64) -> datetime:
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError) as exc:
        raise InvalidTimeSpecError(f"Cannot parse a time from {value!r}") from exc
    if ts is pd.NaT:
        raise InvalidTimeSpecError(f"Cannot parse a time from {value!r}")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    return ts.to_pydatetime()


def _from_components(spec: tuple[object, ...]) -> datetime:
    if len(spec) > _MAX_COMPONENTS:
        raise InvalidTimeSpecError(
            f"Expected at most {_MAX_COMPONENTS} datetime components, got {len(spec)}"
        )
    parts: list[int] = []
    for part in spec:
        if not isinstance(part, numbers.Integral) or isinstance(part, (bool, np.bool_)):
            raise InvalidTimeSpecError(f"Datetime components must be integers, got {part!r}")
        parts.append(int(part))
    if len(parts) == 2:
        parts.append(1)
    try:
        return datetime(*parts, tzinfo=timezone.utc)  # type: ignore[misc]
    except (ValueError, TypeError, OverflowError) as exc:
        raise InvalidTimeSpecError(f"Invalid datetime components {tuple(parts)}") from exc


def _offset(real_now: datetime, delta: timedelta) -> datetime:
    try:
        return real_now + delta
    except OverflowError as exc:
        raise InvalidTimeSpecError(f"Offset {delta!r} moves outside the datetime range") from exc
