"""Logging for the event model's I/O edges: config loading and schema-document checks.

Building and validating events never logs. The package logger is disabled on import so
that applications embedding the model see nothing on stderr until they opt in with
setup_logging().
"""

import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
from typing import Final

from loguru import logger

PACKAGE_LOGGER_NAME: Final[str] = "telemetry.ocsf"

logger.disable(PACKAGE_LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    """Send the package's log records to stderr at the given level (any case)."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
    logger.enable(PACKAGE_LOGGER_NAME)


@contextmanager
def log_span(message: str, *args: Any, **context: Any) -> Iterator[None]:
    """Bracket a config load or schema check with log records.

    The formatted message is logged at debug when the span opens. When it closes, the
    same message is logged at trace with the elapsed seconds appended, marked as done or
    failed. Keyword arguments (e.g. schema_name=...) are bound to every record emitted
    inside the span.
    """
    with logger.contextualize(**context):
        logger.debug(message, *args)
        started_at = time.monotonic()
        outcome = "failed after"
        try:
            yield
            outcome = "done in"
        finally:
            logger.trace(message + " [" + outcome + " {:.5f} sec]", *args, time.monotonic() - started_at)
