"""Logging configuration for UXID.

The library logs through loguru and is disabled on import. ``setup_logging``
is the public entry point for applications (the ``uxid`` CLI uses it too):
it installs a stderr sink, enables the ``uxid`` logger and sends standard
``logging`` records through ``InterceptHandler``. Applications that manage
loguru themselves can call ``logger.enable("uxid")`` instead.
``setup_sqlalchemy_logging`` is an optional helper for services that store
UXIDs with ``uxid.db`` and want SQLAlchemy output in the same sink.
"""

import logging
import sys

from loguru import logger

SQLALCHEMY_LOGGERS = ("sqlalchemy", "sqlalchemy.engine", "sqlalchemy.pool")


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames inside the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str, log_format: str | None = None):
    """Configure loguru logging and enable UXID log output.

    Args:
        log_level: Log level to use (usually ``Settings.log_level``).
        log_format: Optional loguru format string; loguru's default when omitted.
    """
    log_level = log_level.upper()

    logger.remove()
    sink_options = {"level": log_level, "colorize": True}
    if log_format is not None:
        sink_options["format"] = log_format
    logger.add(sys.stderr, **sink_options)
    logger.enable("uxid")

    logger.debug(f"Log level set to: {log_level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def setup_sqlalchemy_logging():
    """Send SQLAlchemy logging (used by the UXID column type) to loguru."""
    for logger_name in SQLALCHEMY_LOGGERS:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False
