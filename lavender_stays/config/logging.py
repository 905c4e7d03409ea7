"""Structured logging for the back office using structlog.

Store and service loggers bind ``collection`` (and usually ``record_id``);
those are folded into the event text so a line reads
``[bookingRequests/B001] Record updated`` in both renderers.
"""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from lavender_stays.config.settings import settings

SERVICE_NAME = "lavender-stays"

# Libraries that log every request or S3 call at INFO
NOISY_LOGGERS = ("httpcore", "httpx", "botocore", "boto3", "s3transfer", "uvicorn.access")

COLLECTION_LABELS = {
    "rooms": "rooms",
    "booking_requests": "bookingRequests",
    "restaurant_orders": "restaurantOrders",
    "menu_items": "menuItems",
    "housekeeping_tasks": "housekeepingTasks",
    "guest_service_requests": "guestServiceRequests",
    "hotel_settings": "hotelSettings",
}


def add_record_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with the collection and record it concerns.

    Collections are shown under their document key. The ``collection`` and
    ``record_id`` keys stay in the event dict for JSON consumers.

    Args:
        logger: The logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary containing log data

    Returns:
        Modified event dictionary
    """
    collection = event_dict.get("collection")
    if not collection:
        return event_dict

    label = COLLECTION_LABELS.get(collection, collection)
    record_id = event_dict.get("record_id")
    if record_id:
        label = f"{label}/{record_id}"
    event_dict["event"] = f"[{label}] {event_dict.get('event', '')}"
    return event_dict


def add_service_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Tag every event with the service name, environment and storage backend."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("environment", settings.environment)
    event_dict.setdefault("storage_backend", settings.storage.backend)
    return event_dict


def _build_handler(log_format: str, log_level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    handler.setLevel(log_level)
    return handler


def configure_logging() -> None:
    """Configure stdlib logging and structlog from ``settings.logging``."""
    log_format = settings.logging.format
    log_level = getattr(logging, settings.logging.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(log_format, log_level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_record_prefix,
            structlog.processors.JSONRenderer()
            if log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger; it picks up the configuration once ``configure_logging`` has run."""
    return structlog.get_logger(name)
