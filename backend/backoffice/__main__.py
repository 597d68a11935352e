"""Run the API with uvicorn: ``python -m backoffice`` or the ``backoffice`` script."""

import logging

import uvicorn

from backoffice.config import get_settings
from backoffice.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting Backoffice API on {settings.host}:{settings.port}")
    uvicorn.run(
        "backoffice.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
