"""
Run the API server: ``python -m app``.

Serves until externally terminated. All state is in memory and is
discarded on shutdown.
"""

import logging

import uvicorn

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(level=settings.log_level, request_log_level=settings.request_log_level)
    logger.info("Starting %s at http://%s:%d", settings.project_name, settings.host, settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
