# digest_catalog/logging/logger.py
"""
Logger factory for digest-catalog.

All package loggers hang off the ``digest_catalog`` logger, which owns a
single stderr handler. Standard output is reserved for status lines.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "digest_catalog"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current sys.stderr."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _ensure_handler(root: logging.Logger) -> None:
    if any(isinstance(h, _StderrHandler) for h in root.handlers):
        return

    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.addHandler(handler)


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the package root logger.

    Safe to call more than once; only the level changes on repeated calls.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    _ensure_handler(root)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
