"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs sensitive data (request bodies, passwords, auth tokens).
"""

import logging
import sys

from app.infrastructure.tickets.request_log_sink import REQUEST_LOGGER_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(level: str = "INFO", request_log_level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        request_log_level: Level of the per-request log lines. Kept separate
            so request lines stay visible when the root level is raised.
    """
    logging.basicConfig(
        level=_parse_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(REQUEST_LOGGER_NAME).setLevel(_parse_level(request_log_level))

    # The response mapper already logs one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
