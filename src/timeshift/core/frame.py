from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from timeshift.core.clock import RealClock
from timeshift.core.errors import VirtualTimeRangeError
from timeshift.core.resolve import resolve_factor, resolve_time


class MockType(str, Enum):
    FREEZE = "freeze"
    TRAVEL = "travel"
    SCALE = "scale"


@dataclass(frozen=True, slots=True)
class OverrideFrame:
    """One active time-mocking directive.

    Everything is fixed at creation, so the virtual time a frame reports is a
    pure function of the real reading passed to ``time_at``/``monotonic_at``.
    """

    mock_type: MockType
    target: datetime
    anchor_real_time: datetime
    anchor_monotonic: float
    factor: float = 1.0
    monotonic_offset: float | None = None  # None: monotonic clock is frozen

    @staticmethod
    def build(
        mock_type: MockType | str,
        *spec: object,
        clock: RealClock,
        factor: object = None,
    ) -> OverrideFrame:
        mock_type = MockType(mock_type)
        real_now = clock.now()
        anchor_monotonic = clock.monotonic()
        target = resolve_time(spec, real_now)

        if mock_type is MockType.SCALE:
            scale_factor = resolve_factor(factor)
        else:
            scale_factor = 1.0

        offset: float | None = None
        if mock_type is not MockType.FREEZE:
            offset = (target - real_now).total_seconds()

        return OverrideFrame(
            mock_type=mock_type,
            target=target,
            anchor_real_time=real_now,
            anchor_monotonic=anchor_monotonic,
            factor=scale_factor,
            monotonic_offset=offset,
        )

    @property
    def initial_time(self) -> datetime:
        return self.target

    def time_at(self, real_now: datetime) -> datetime:
        """Virtual wall-clock instant for the real reading ``real_now``."""
        if self.mock_type is MockType.FREEZE:
            return self.target
        elapsed = real_now - self.anchor_real_time
        try:
            if self.mock_type is MockType.SCALE:
                return self.target + elapsed * self.factor
            return self.target + elapsed
        except OverflowError as exc:
            raise VirtualTimeRangeError(
                f"{self.mock_type.value} frame from {self.target.isoformat()} "
                f"left the datetime range after {elapsed}"
            ) from exc

    def monotonic_at(self, real_monotonic: float) -> float:
        """Virtual monotonic tick for the real tick ``real_monotonic``.

        A monotonic clock has no absolute meaning, so Freeze pins the tick seen
        at creation and Travel/Scale shift elapsed ticks by the travel offset.
        """
        if self.monotonic_offset is None:
            return self.anchor_monotonic
        if self.mock_type is MockType.SCALE:
            elapsed = real_monotonic - self.anchor_monotonic
            return self.anchor_monotonic + elapsed * self.factor + self.monotonic_offset
        return real_monotonic + self.monotonic_offset
