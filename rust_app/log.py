"""
Logging configuration for standard error output.

Standard output is reserved for the build report.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> logging.Handler:
    """
    Configure the root logger with a single stderr handler.

    Returns the installed handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # clear existing handlers to avoid duplicates on repeated calls
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)
    return handler
