"""Logging utilities for topowrite commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "topowrite"
_CONSOLE_FORMAT = "%(filename)s:%(lineno)d | %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Names accepted by --loglevel, quietest last.
LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the topowrite hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def resolve_level(level: str | int) -> int:
    """Map a level name (``"debug"`` ... ``"critical"``) or number to a logging level."""
    if isinstance(level, int):
        return level
    name = level.strip().lower()
    if name.isdigit():
        return int(name)
    if name not in LEVELS:
        choices = ", ".join(LEVELS)
        raise ValueError(f"Unknown log level: {level} (expected one of {choices})")
    return LEVELS[name]


def configure_logging(
    *,
    level: str | int = "critical",
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Install console (and optional file) handlers on the topowrite logger.

    ``verbose`` overrides ``level`` with DEBUG. Earlier handlers are closed
    and replaced, so repeated calls never duplicate output.
    """
    threshold = logging.DEBUG if verbose else resolve_level(level)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(threshold)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(threshold)
        fmt = _FILE_FORMAT if isinstance(handler, logging.FileHandler) else _CONSOLE_FORMAT
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger


__all__ = ["LEVELS", "configure_logging", "get_logger", "resolve_level"]
