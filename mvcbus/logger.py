from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "mvcbus"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_level(value: str) -> int:
    """
    Convert a level name such as ``"debug"`` into a logging level.

    Raises
    ------
    ValueError
        If the name is not a known level.
    """
    try:
        return _LEVELS[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {value!r}") from None


class _CategoryFilter(logging.Filter):
    """Let through only records whose logger suffix is in ``allowed``."""

    def __init__(self, allowed: set) -> None:
        super().__init__()
        self.allowed = allowed

    def filter(self, record: logging.LogRecord) -> bool:
        # record.name like: mvcbus.view, mvcbus.controller
        suffix = (record.name or "").split(".")[-1]
        return suffix in self.allowed


def setup_logger(level: int = logging.INFO, name: str = LOGGER_NAME) -> logging.Logger:
    """Create or update the project logger.

    - MVCBUS_LOG_LEVEL overrides ``level`` on every call.
    - Exactly one stderr StreamHandler is kept on the base logger; its
      formatter and filters are refreshed instead of adding another handler.
    - MVCBUS_LOG_CATS restricts output to the listed child loggers.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("MVCBUS_LOG_LEVEL") or "").strip().lower()
    if env_level:
        level = _LEVELS.get(env_level, level)
    logger.setLevel(level)

    stream_handler: Optional[logging.StreamHandler] = None
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            stream_handler = h
            break

    if stream_handler is None:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(stream_handler)

    stream_handler.setFormatter(
        logging.Formatter(fmt="[%(asctime)s] %(levelname)s: %(message)s", datefmt="%H:%M:%S")
    )

    stream_handler.filters.clear()
    cats = (os.getenv("MVCBUS_LOG_CATS") or "").strip()
    if cats:
        allowed = {c.strip() for c in cats.split(",") if c.strip()}
        stream_handler.addFilter(_CategoryFilter(allowed))

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the project logger, or one of its children."""
    base = logging.getLogger(LOGGER_NAME)
    if not base.handlers:
        base = setup_logger()
    return base if not name else base.getChild(name)
