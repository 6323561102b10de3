from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum

from timeshift.core.frame import OverrideFrame

logger = logging.getLogger(__name__)


class Affinity(str, Enum):
    SHARED = "shared"
    PER_THREAD = "per_thread"


@dataclass
class ContextState:
    """Override stack, baseline and scope flag for one logical context."""

    stack: list[OverrideFrame] = field(default_factory=list)
    baseline: OverrideFrame | None = None
    in_scope: bool = False

    @property
    def top(self) -> OverrideFrame | None:
        return self.stack[-1] if self.stack else None

    def reset(self) -> None:
        """Drop every override and the baseline; ``in_scope`` is untouched."""
        self.stack = []
        self.baseline = None


class StateStore:
    """Hands out the ContextState of the calling context.

    Under shared affinity every thread gets the same instance and nothing is
    locked. Under per-thread affinity each thread lazily gets its own.
    """

    def __init__(self, affinity: Affinity | str = Affinity.SHARED) -> None:
        self._affinity = Affinity(affinity)
        self._shared = ContextState()
        self._local = threading.local()

    @property
    def affinity(self) -> Affinity:
        return self._affinity

    @affinity.setter
    def affinity(self, value: Affinity | str) -> None:
        # Switching storage discards everything held by the old and new storage
        self._affinity = Affinity(value)
        self._shared = ContextState()
        self._local = threading.local()
        logger.debug("Thread affinity set to %s, state discarded", self._affinity.value)

    def current(self) -> ContextState:
        if self._affinity is Affinity.SHARED:
            return self._shared
        state = getattr(self._local, "state", None)
        if state is None:
            state = ContextState()
            self._local.state = state
        return state
