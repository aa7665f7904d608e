"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers below the ``namecombo`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Library code never configures handlers beyond a ``NullHandler``.
    - Configuration is idempotent; calling it twice keeps one handler.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging", "reset_logging"]

ROOT_LOGGER_NAME = "namecombo"

_root = logging.getLogger(ROOT_LOGGER_NAME)
if not any(isinstance(h, logging.NullHandler) for h in _root.handlers):
    _root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed below the package namespace.

    ``name`` is usually ``__name__``; names outside the package are nested
    under ``namecombo`` so one handler controls all output.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger at ``level``."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for handler in list(_root.handlers):
        if getattr(handler, "_namecombo_cli", False):
            _root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._namecombo_cli = True  # type: ignore[attr-defined]
    _root.addHandler(handler)
    _root.setLevel(level)
    return _root


def reset_logging() -> None:
    """Remove the handler added by :func:`configure_logging` and clear the level."""

    for handler in list(_root.handlers):
        if getattr(handler, "_namecombo_cli", False):
            _root.removeHandler(handler)
    _root.setLevel(logging.NOTSET)
