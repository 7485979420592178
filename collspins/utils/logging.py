"""
Logging configuration.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Handlers for the 'collspins' namespace are attached by ``setup_logging``
when an application or script asks for them.
"""
import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "collspins"
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Marks handlers owned by setup_logging so a second call replaces only those
_OWNED = '_collspins_handler'


def _own(handler: logging.Handler, level: int,
         formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  stream: Optional[IO] = None,
                  propagate: bool = False) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Logging level for the package logger and its handlers
        log_file: Optional path; messages are appended to this file
        stream: Console stream (default: sys.stderr)
        propagate: Whether records also reach the root logger's handlers

    Returns:
        The configured 'collspins' logger.

    Handlers added by an earlier call are closed and replaced. Handlers
    attached by anyone else are left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = propagate

    for handler in list(logger.handlers):
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_own(logging.StreamHandler(stream or sys.stderr), level, formatter))
    if log_file:
        logger.addHandler(_own(logging.FileHandler(log_file, encoding='utf-8'),
                               level, formatter))

    logger.debug("Logging set up at level %s", logging.getLevelName(level))
    return logger
