"""Logging configuration for the OpenSpec CLI."""

import logging
import os

import structlog

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(debug: bool = False) -> int:
    """
    Configure stdlib logging and structlog with a shared level.

    --debug wins; otherwise the LOGLEVEL environment variable is used,
    defaulting to WARNING so normal CLI output stays clean.

    Returns:
        The effective log level
    """
    if debug:
        log_level = logging.DEBUG
    else:
        loglevel = os.getenv("LOGLEVEL", "WARNING").upper()
        log_level = LOG_LEVELS.get(loglevel, logging.WARNING)

    logging.basicConfig(level=log_level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
    return log_level
