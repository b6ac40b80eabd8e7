"""
Logging configuration for the error pages service.

One line per event on stdout, prefixed with the process id so lines
from several uvicorn workers can be told apart. Response bodies and
maintenance content are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(process)d | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "uvicorn.access"


def configure_logging(level: str = "INFO", access_log: bool = False) -> None:
    """Configure the root logger for the service.

    uvicorn is started without its own logging config, so its loggers
    propagate here. Access lines are off unless ``access_log`` is set.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        access_log: Keep uvicorn's per-request access lines.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(ACCESS_LOGGER).setLevel(
        logging.NOTSET if access_log else logging.WARNING
    )
