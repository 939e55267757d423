"""
Logging Configuration
=====================
Opt-in log output for the complex-plane math core.

The parser, compiler and generators only ever log through
``logging.getLogger(__name__)``, so everything lands under the
``complexplane`` namespace:

    WARNING  malformed expressions, malformed transforms, evaluation errors
             (unknown function, wrong arity, undefined symbol)
    DEBUG    compiled expressions, surviving sample counts per contour,
             invalid cell counts per grid, samples kept per integral

Nothing reaches a handler until the embedding application calls
:func:`setup_logging`. Calling it again replaces the previous handlers.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "complexplane"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the math core's log records to stdout and, optionally, a file.

    Use ``logging.DEBUG`` to see per-call sample statistics of the
    generators; the default ``logging.INFO`` only shows warnings about bad
    expressions.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Optional path of a log file, truncated on every call.

    Returns:
        The ``complexplane`` package logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return package_logger
