"""Configuration management for timeshift using TOML files + kwargs overrides."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass
class GuardConfig:
    safe_mode: bool = False


@dataclass
class StateConfig:
    thread_affinity: str = "shared"  # "shared" or "per_thread"


@dataclass
class ClockConfig:
    mock_monotonic: bool = False


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class TimeshiftConfig:
    guard: GuardConfig = field(default_factory=GuardConfig)
    state: StateConfig = field(default_factory=StateConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def defaults() -> TimeshiftConfig:
        return TimeshiftConfig()

    @staticmethod
    def load(path: str | Path) -> TimeshiftConfig:
        """Load config from a TOML file. Missing file returns defaults."""
        cfg = TimeshiftConfig()
        p = Path(path)
        if not p.exists():
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> TimeshiftConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation mapped to flat names:
          guard.safe_mode=true
          state.thread_affinity=per_thread
          logging.level=DEBUG
        """
        cfg = TimeshiftConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg


def _to_bool(value: object) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)


def _apply_toml(cfg: TimeshiftConfig, data: dict) -> None:
    if "guard" in data:
        g = data["guard"]
        if "safe_mode" in g:
            cfg.guard.safe_mode = _to_bool(g["safe_mode"])

    if "state" in data:
        s = data["state"]
        if "thread_affinity" in s:
            cfg.state.thread_affinity = str(s["thread_affinity"])

    if "clock" in data:
        c = data["clock"]
        if "mock_monotonic" in c:
            cfg.clock.mock_monotonic = _to_bool(c["mock_monotonic"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])


def _apply_overrides(cfg: TimeshiftConfig, overrides: dict[str, object]) -> None:
    mapping: dict[str, tuple[object, str]] = {
        "guard.safe_mode": (cfg.guard, "safe_mode"),
        "state.thread_affinity": (cfg.state, "thread_affinity"),
        "clock.mock_monotonic": (cfg.clock, "mock_monotonic"),
        "logging.level": (cfg.logging, "level"),
    }

    for key, value in overrides.items():
        if key in mapping:
            obj, attr = mapping[key]
            # Coerce to the same type as the default
            current = getattr(obj, attr)
            if isinstance(current, bool):
                value = _to_bool(value)
            else:
                value = str(value)
            setattr(obj, attr, value)
