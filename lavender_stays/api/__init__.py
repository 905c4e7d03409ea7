"""HTTP API package."""

from lavender_stays.api.app import create_app

__all__ = ["create_app"]
