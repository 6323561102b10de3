"""Module-level interface backed by one process-wide default engine.

Code that intercepts the host's clock reads should route them through
``now``/``time``/``today``/``monotonic`` here.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import date, datetime
from typing import TypeVar

from timeshift.core.config import TimeshiftConfig
from timeshift.core.engine import TimeEngine
from timeshift.core.frame import OverrideFrame
from timeshift.core.logging import setup_logging
from timeshift.core.state import Affinity

T = TypeVar("T")

_engine = TimeEngine()


def get_engine() -> TimeEngine:
    return _engine


def configure(config: TimeshiftConfig) -> None:
    """Apply a loaded config to the default engine and install logging."""
    setup_logging(config.logging.level)
    _engine.configure(config)


def freeze(*spec: object, body: Callable[[datetime], T] | None = None) -> T | datetime:
    return _engine.freeze(*spec, body=body)


def travel(*spec: object, body: Callable[[datetime], T] | None = None) -> T | datetime:
    return _engine.travel(*spec, body=body)


def scale(
    factor: object = None,
    *spec: object,
    body: Callable[[datetime], T] | None = None,
) -> T | datetime:
    return _engine.scale(factor, *spec, body=body)


def frozen(*spec: object) -> AbstractContextManager[datetime]:
    return _engine.frozen(*spec)


def travelling(*spec: object) -> AbstractContextManager[datetime]:
    return _engine.travelling(*spec)


def scaled(factor: object = None, *spec: object) -> AbstractContextManager[datetime]:
    return _engine.scaled(factor, *spec)


def return_(body: Callable[[], T] | None = None) -> T | None:
    return _engine.return_(body)


unfreeze = return_


def real_time() -> AbstractContextManager[datetime]:
    return _engine.real_time()


def unmock() -> None:
    _engine.unmock()


def get_baseline() -> datetime | None:
    return _engine.baseline


def set_baseline(*spec: object) -> datetime | None:
    """Set the baseline; ``set_baseline(None)`` clears it."""
    if spec == (None,):
        _engine.baseline = None
        return None
    return _engine.set_baseline(*spec)


def return_to_baseline() -> datetime:
    return _engine.return_to_baseline()


def is_frozen() -> bool:
    return _engine.is_frozen()


def is_travelling() -> bool:
    return _engine.is_travelling()


def is_scaled() -> bool:
    return _engine.is_scaled()


def top_frame() -> OverrideFrame | None:
    return _engine.top_frame()


def now() -> datetime:
    return _engine.now()


def time() -> float:
    return _engine.time()


def today() -> date:
    return _engine.today()


def monotonic() -> float:
    return _engine.monotonic()


def set_safe_mode(enabled: bool) -> None:
    _engine.safe_mode = enabled


def set_thread_affinity(affinity: Affinity | str) -> None:
    _engine.thread_affinity = affinity


def set_mock_monotonic(enabled: bool) -> None:
    _engine.mock_monotonic = enabled
