"""Document storage backends."""

from lavender_stays.storage.base import (
    DocumentStorage,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from lavender_stays.storage.factory import build_storage
from lavender_stays.storage.file_storage import FileStorage
from lavender_stays.storage.memory_storage import InMemoryStorage
from lavender_stays.storage.s3_storage import S3Storage

__all__ = [
    "DocumentStorage",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "FileStorage",
    "InMemoryStorage",
    "S3Storage",
    "build_storage",
]
