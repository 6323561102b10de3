from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from datetime import date, datetime
from typing import TypeVar

from timeshift.core.clock import RealClock, SystemClock
from timeshift.core.config import TimeshiftConfig
from timeshift.core.errors import SafeModeError, TimeshiftError
from timeshift.core.frame import MockType, OverrideFrame
from timeshift.core.state import Affinity, ContextState, StateStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeEngine:
    """Keeps the override stack and answers "what time is it" against it.

    Every override can be permanent (left on the stack until ``unmock``) or
    scoped: given a ``body`` callable, or used through ``scoped``/``frozen``/
    ``travelling``/``scaled``, the stack is put back exactly as it was on every
    exit path, including exceptions.
    """

    def __init__(
        self,
        clock: RealClock | None = None,
        safe_mode: bool = False,
        thread_affinity: Affinity | str = Affinity.SHARED,
        mock_monotonic: bool = False,
    ) -> None:
        self.clock = clock or SystemClock()
        self.safe_mode = safe_mode
        self.mock_monotonic = mock_monotonic
        self._store = StateStore(thread_affinity)

    @property
    def state(self) -> ContextState:
        return self._store.current()

    @property
    def thread_affinity(self) -> Affinity:
        return self._store.affinity

    @thread_affinity.setter
    def thread_affinity(self, value: Affinity | str) -> None:
        if self.state.in_scope:
            raise TimeshiftError("Thread affinity cannot change inside a scoped override")
        self._store.affinity = value

    def configure(self, config: TimeshiftConfig) -> None:
        affinity = Affinity(config.state.thread_affinity)
        if affinity is not self.thread_affinity:
            self.thread_affinity = affinity
        self.safe_mode = config.guard.safe_mode
        self.mock_monotonic = config.clock.mock_monotonic

    def apply(
        self,
        mock_type: MockType | str,
        *spec: object,
        factor: object = None,
        body: Callable[[datetime], T] | None = None,
    ) -> T | datetime:
        """Push an override.

        With ``body`` the override only lasts for the call and ``body``'s result
        is returned. Without it the override stays and the initial virtual
        time is returned.
        """
        if body is not None:
            with self.scoped(mock_type, *spec, factor=factor) as initial:
                return body(initial)

        state = self.state
        if self.safe_mode and not state.in_scope:
            logger.warning("Rejected permanent %s while safe mode is enabled", mock_type)
            raise SafeModeError()

        frame = OverrideFrame.build(mock_type, *spec, clock=self.clock, factor=factor)
        state.stack.append(frame)
        logger.debug("Pushed permanent %s frame at %s (depth %d)",
                     frame.mock_type.value, frame.target.isoformat(), len(state.stack))
        return frame.initial_time

    @contextmanager
    def scoped(
        self,
        mock_type: MockType | str,
        *spec: object,
        factor: object = None,
    ) -> Iterator[datetime]:
        state = self.state
        frame = OverrideFrame.build(mock_type, *spec, clock=self.clock, factor=factor)

        stack_backup = list(state.stack)
        scope_backup = state.in_scope
        state.stack.append(frame)
        state.in_scope = True
        logger.debug("Entered %s scope at %s (depth %d)",
                     frame.mock_type.value, frame.target.isoformat(), len(state.stack))
        try:
            yield frame.initial_time
        finally:
            state.stack = stack_backup
            state.in_scope = scope_backup
            logger.debug("Left %s scope (depth %d)", frame.mock_type.value, len(stack_backup))

    def freeze(self, *spec: object, body: Callable[[datetime], T] | None = None) -> T | datetime:
        return self.apply(MockType.FREEZE, *spec, body=body)

    def travel(self, *spec: object, body: Callable[[datetime], T] | None = None) -> T | datetime:
        return self.apply(MockType.TRAVEL, *spec, body=body)

    def scale(
        self,
        factor: object = None,
        *spec: object,
        body: Callable[[datetime], T] | None = None,
    ) -> T | datetime:
        return self.apply(MockType.SCALE, *spec, factor=factor, body=body)

    def frozen(self, *spec: object) -> AbstractContextManager[datetime]:
        return self.scoped(MockType.FREEZE, *spec)

    def travelling(self, *spec: object) -> AbstractContextManager[datetime]:
        return self.scoped(MockType.TRAVEL, *spec)

    def scaled(self, factor: object = None, *spec: object) -> AbstractContextManager[datetime]:
        return self.scoped(MockType.SCALE, *spec, factor=factor)

    def unmock(self) -> None:
        self.state.reset()
        logger.debug("Override stack cleared")

    @contextmanager
    def real_time(self) -> Iterator[datetime]:
        """Expose real time for the duration of the block, then restore."""
        state = self.state
        stack_backup = state.stack
        baseline_backup = state.baseline
        state.stack = []
        state.baseline = None
        try:
            yield self.clock.now()
        finally:
            state.stack = stack_backup
            state.baseline = baseline_backup

    def return_(self, body: Callable[[], T] | None = None) -> T | None:
        """Run ``body`` against real time, or drop every override if no body."""
        if body is None:
            self.unmock()
            return None
        with self.real_time():
            return body()

    unfreeze = return_

    @property
    def baseline(self) -> datetime | None:
        frame = self.state.baseline
        return frame.target if frame is not None else None

    @baseline.setter
    def baseline(self, value: object) -> None:
        if value is None:
            self.state.baseline = None
            return
        self.set_baseline(value)

    def set_baseline(self, *spec: object) -> datetime:
        """Travel to ``spec`` and remember it as the point to collapse back onto."""
        state = self.state
        frame = OverrideFrame.build(MockType.TRAVEL, *spec, clock=self.clock)
        state.baseline = frame
        state.stack.append(frame)
        logger.debug("Baseline set to %s", frame.target.isoformat())
        return frame.initial_time

    def return_to_baseline(self) -> datetime:
        state = self.state
        if state.baseline is not None:
            state.stack = [state.baseline]
        else:
            self.unmock()
        return self.now()

    def top_frame(self) -> OverrideFrame | None:
        return self.state.top

    def _top_is(self, mock_type: MockType) -> bool:
        top = self.state.top
        return top is not None and top.mock_type is mock_type

    def is_frozen(self) -> bool:
        return self._top_is(MockType.FREEZE)

    def is_travelling(self) -> bool:
        return self._top_is(MockType.TRAVEL)

    def is_scaled(self) -> bool:
        return self._top_is(MockType.SCALE)

    def now(self) -> datetime:
        real_now = self.clock.now()
        top = self.state.top
        if top is None:
            return real_now
        return top.time_at(real_now)

    def time(self) -> float:
        return self.now().timestamp()

    def today(self) -> date:
        return self.now().date()

    def monotonic(self) -> float:
        real_monotonic = self.clock.monotonic()
        top = self.state.top
        if top is None or not self.mock_monotonic:
            return real_monotonic
        return top.monotonic_at(real_monotonic)
