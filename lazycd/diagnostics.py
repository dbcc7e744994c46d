"""Diagnostic logging for lazycd.

Messages go to stderr through the ``lazycd`` logger. While the terminal is in
raw full-screen mode they are held back and written once it is restored.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from logging.handlers import MemoryHandler
from typing import TextIO

LOGGER_NAME = "lazycd"
DIAGNOSTIC_FORMAT = "lazycd: %(message)s"
DIAGNOSTIC_BUFFER_CAPACITY = 10_000


class _DiagnosticStreamHandler(logging.StreamHandler):
    """Marker subclass so repeated configuration replaces our own handler only."""


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Install the stderr handler on the ``lazycd`` logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, _DiagnosticStreamHandler):
            logger.removeHandler(existing)
            existing.close()
    handler = _DiagnosticStreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler


class _FanOutHandler(logging.Handler):
    """Forward records to several handlers (flush target for the buffer)."""

    def __init__(self, targets: list[logging.Handler]) -> None:
        super().__init__()
        self.targets = targets

    def emit(self, record: logging.LogRecord) -> None:
        for target in self.targets:
            if record.levelno >= target.level:
                target.handle(record)


@contextlib.contextmanager
def buffered_diagnostics(capacity: int = DIAGNOSTIC_BUFFER_CAPACITY):
    """Hold ``lazycd`` log records until the block exits, then emit them."""
    logger = logging.getLogger(LOGGER_NAME)
    targets = list(logger.handlers)
    buffer = MemoryHandler(
        capacity,
        flushLevel=logging.CRITICAL + 1,
        target=_FanOutHandler(targets),
        flushOnClose=True,
    )
    for target in targets:
        logger.removeHandler(target)
    logger.addHandler(buffer)
    try:
        yield buffer
    finally:
        logger.removeHandler(buffer)
        for target in targets:
            logger.addHandler(target)
        buffer.close()
