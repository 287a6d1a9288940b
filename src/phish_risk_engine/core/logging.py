"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER_NAME = "phish_risk_engine"


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level or "").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | int = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stdout handler to the package logger. Safe to call repeatedly."""

    root = logging.getLogger("phish_risk_engine")
    root.setLevel(resolve_level(level))
    handler = next((item for item in root.handlers if item.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)
    else:
        handler.setStream(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    return root
