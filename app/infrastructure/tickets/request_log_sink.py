"""
Adapter: Request log sink backed by the logging module.

Implements the RequestLogSink port.
Each request produces one JSON line on the ``app.request_log`` logger.
"""

import json
import logging
from dataclasses import asdict

from app.domain.tickets.entities import RequestLogLine
from app.domain.tickets.ports import RequestLogSink

REQUEST_LOGGER_NAME = "app.request_log"


class LoggingRequestLogSink(RequestLogSink):
    """Writes request log lines as compact JSON through logging."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(REQUEST_LOGGER_NAME)

    def write(self, line: RequestLogLine) -> None:
        """Serialize and emit one request log line.

        Fields that are not set are dropped from the JSON object.
        """
        payload = {key: value for key, value in asdict(line).items() if value is not None}
        self._logger.info(json.dumps(payload, separators=(",", ":"), sort_keys=True))
