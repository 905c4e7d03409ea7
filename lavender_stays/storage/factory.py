"""Storage backend selection from settings."""

from lavender_stays.config import settings
from lavender_stays.storage.base import DocumentStorage
from lavender_stays.storage.file_storage import FileStorage
from lavender_stays.storage.memory_storage import InMemoryStorage
from lavender_stays.storage.s3_storage import S3Storage


def build_storage() -> DocumentStorage:
    """Create the storage backend selected by ``settings.storage.backend``.

    Returns:
        Configured storage backend
    """
    if settings.storage.backend == "s3":
        return S3Storage(settings.storage.s3_bucket, settings.storage.s3_key)
    if settings.storage.backend == "memory":
        return InMemoryStorage()
    return FileStorage(settings.storage.data_file)
