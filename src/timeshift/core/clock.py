from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class RealClock(ABC):
    """Source of the real readings the engine computes virtual time from."""

    @abstractmethod
    def now(self) -> datetime:
        """Returns the real wall-clock instant as a timezone-aware UTC datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Returns the real monotonic tick in seconds."""
        ...


class SystemClock(RealClock):
    """Real wall clock and monotonic clock of the host."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()


class ManualClock(RealClock):
    """Real clock stand-in that only moves when told to."""

    def __init__(self, start: datetime | None = None, monotonic: float = 1_000.0) -> None:
        self._start = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._start_monotonic = monotonic
        self.reset()

    def now(self) -> datetime:
        return self._current_time

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float) -> None:
        """Move both clocks forward by ``seconds``."""
        self._current_time += timedelta(seconds=seconds)
        self._monotonic += seconds

    def set(self, instant: datetime) -> None:
        """Jump the wall clock; the monotonic clock is left alone."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._current_time = instant

    def reset(self) -> None:
        self._current_time = self._start
        self._monotonic = self._start_monotonic
