"""Logging for the ``bank_journal`` package.

Library modules obtain loggers through :func:`get_logger`, which keeps every
logger under the ``bank_journal`` root, and never attach handlers. The CLI
calls :func:`configure_logging` at startup; records go to stderr so they do
not mix with command output on stdout.

The level comes from ``BANK_JOURNAL_LOG_LEVEL`` (a name such as ``DEBUG`` or
a number) and defaults to ``WARNING``. ``INFO`` adds one summary per decoded
file; ``DEBUG`` adds one line per skipped statement row.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

ROOT_LOGGER = "bank_journal"
LEVEL_ENV_VAR = "BANK_JOURNAL_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"

# Silent until an entrypoint configures output.
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def resolve_level(value: int | str | None) -> int:
    """Map a level number or name to a ``logging`` level.

    Blank or unknown names resolve to :data:`DEFAULT_LEVEL`.
    """

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    return logging.getLevelNamesMapping().get(text.upper(), DEFAULT_LEVEL)


def configure_logging(
    level: int | str | None = None, *, stream: IO[str] | None = None
) -> logging.Handler:
    """Send package records to ``stream`` (stderr by default).

    A later call replaces the handler installed by an earlier one, so each CLI
    invocation writes to the streams it was started with. Returns the handler.
    """

    global _handler
    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    resolved = resolve_level(level if level is not None else os.getenv(LEVEL_ENV_VAR))
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return _handler


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger, placed under the package root if it is not already."""

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


__all__ = ["LEVEL_ENV_VAR", "configure_logging", "get_logger", "resolve_level"]
