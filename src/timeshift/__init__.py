"""Virtual "now" for deterministic tests: freeze, travel and scale time."""

from timeshift.api import (
    configure,
    freeze,
    frozen,
    get_baseline,
    get_engine,
    is_frozen,
    is_scaled,
    is_travelling,
    monotonic,
    now,
    real_time,
    return_,
    return_to_baseline,
    scale,
    scaled,
    set_baseline,
    set_mock_monotonic,
    set_safe_mode,
    set_thread_affinity,
    time,
    today,
    top_frame,
    travel,
    travelling,
    unfreeze,
    unmock,
)
from timeshift.core.clock import ManualClock, RealClock, SystemClock
from timeshift.core.config import TimeshiftConfig
from timeshift.core.engine import TimeEngine
from timeshift.core.errors import (
    InvalidTimeSpecError,
    SafeModeError,
    TimeshiftError,
    VirtualTimeRangeError,
)
from timeshift.core.frame import MockType, OverrideFrame
from timeshift.core.state import Affinity

__all__ = [
    "Affinity",
    "InvalidTimeSpecError",
    "ManualClock",
    "MockType",
    "OverrideFrame",
    "RealClock",
    "SafeModeError",
    "SystemClock",
    "TimeEngine",
    "TimeshiftConfig",
    "TimeshiftError",
    "VirtualTimeRangeError",
    "configure",
    "freeze",
    "frozen",
    "get_baseline",
    "get_engine",
    "is_frozen",
    "is_scaled",
    "is_travelling",
    "monotonic",
    "now",
    "real_time",
    "return_",
    "return_to_baseline",
    "scale",
    "scaled",
    "set_baseline",
    "set_mock_monotonic",
    "set_safe_mode",
    "set_thread_affinity",
    "time",
    "today",
    "top_frame",
    "travel",
    "travelling",
    "unfreeze",
    "unmock",
]
