"""Whole-document record store."""

from lavender_stays.store.engine import (
    RecordNotFoundError,
    RecordStore,
    new_record_id,
    utc_now,
)
from lavender_stays.store.seed import build_default_settings, build_seed_document

__all__ = [
    "RecordStore",
    "RecordNotFoundError",
    "new_record_id",
    "utc_now",
    "build_seed_document",
    "build_default_settings",
]
