"""structlog setup for jsarray.

Events go through the standard library logger named ``jsarray``, which
carries a NullHandler, so nothing is written anywhere until the application
configures logging or calls configure_logging().
"""

from __future__ import annotations

import logging

import structlog

from jsarray.config import get_config, normalize_log_level

LOGGER_NAME = "jsarray"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger() -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the ``jsarray`` stdlib logger."""
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str | None = None) -> None:
    """Emit jsarray events to stderr at ``level``.

    Args:
        level: Standard level name. Defaults to JSARRAY_LOG_LEVEL.

    Raises:
        ValueError: If ``level`` is not a standard level name.
    """
    name = normalize_log_level(level) if level is not None else get_config().log_level
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.setLevel(logging.getLevelNamesMapping()[name])
    if not any(isinstance(h, logging.StreamHandler) for h in stdlib_logger.handlers):
        stdlib_logger.addHandler(logging.StreamHandler())
