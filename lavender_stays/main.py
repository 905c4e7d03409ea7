"""Main entry point for the Lavender Stays back office."""

import sys

import uvicorn

from lavender_stays.api import create_app
from lavender_stays.config import configure_logging, get_logger, settings
from lavender_stays.services import BackOffice
from lavender_stays.storage.factory import build_storage
from lavender_stays.store import RecordStore

logger = get_logger(__name__)


def build_back_office() -> BackOffice:
    """Wire the configured storage backend into a ready back office."""
    storage = build_storage()
    office = BackOffice(RecordStore(storage))
    office.initialize()
    logger.info(
        "Data document ready",
        backend=settings.storage.backend,
        location=storage.location,
    )
    return office


def main() -> int:
    """Validate configuration, initialize the data document and serve the API.

    Returns:
        Process exit code
    """
    logger.info("Starting Lavender Stays", environment=settings.environment)

    missing = settings.validate_storage()
    if missing:
        logger.error("Storage config incomplete", missing=missing)
        return 1

    try:
        app = create_app(build_back_office())
        uvicorn.run(
            app,
            host=settings.api.host,
            port=settings.api.port,
            log_config=None,
        )
        return 0
    except Exception as e:
        logger.error(
            "Fatal error in main application",
            error=str(e),
            exc_info=True,
        )
        return 1


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
