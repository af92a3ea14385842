"""
Logging Configuration
The engine logs through the 'scaledivision' logger and stays silent by
default. Applications opt in with `setup_logging()`.
"""
import logging
import sys
from typing import Optional, TextIO

from scaledivision.config import LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


def get_package_logger() -> logging.Logger:
    """Return the package logger, with a NullHandler attached exactly once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Make the engine's log output visible.

    Rebuilds are logged at DEBUG and rejected input at WARNING, so the
    default level shows everything the engine reports. Calling this again
    replaces the handlers of the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save logs to a file.
        stream: Stream for console output. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    logger = get_package_logger()
    logger.setLevel(level)

    # Drop handlers from an earlier call, keep the NullHandler
    for handler in [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging enabled at level {logging.getLevelName(level)}.")
    return logger
