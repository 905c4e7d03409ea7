"""Configuration package."""

from lavender_stays.config.logging import configure_logging, get_logger
from lavender_stays.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]
