from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for timeshift."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)

    root = logging.getLogger("timeshift")
    root.setLevel(numeric_level)
    # Calling twice must not duplicate output
    for existing in list(root.handlers):
        if getattr(existing, "_timeshift_handler", False):
            root.removeHandler(existing)
    handler._timeshift_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
