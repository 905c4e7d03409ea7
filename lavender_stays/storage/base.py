"""Read-whole / write-whole storage interface for the hotel data document."""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Base exception for document storage failures."""

    pass


class StorageReadError(StorageError):
    """Raised when the stored document cannot be read."""

    pass


class StorageWriteError(StorageError):
    """Raised when the document cannot be written."""

    pass


class DocumentStorage(ABC):
    """Abstract holder of exactly one serialized document.

    Implementations never interpret the content; they only move the whole
    text in and out. A write must not leave a half-written document
    visible to the next read.
    """

    @abstractmethod
    def read(self) -> Optional[str]:
        """Read the whole stored document.

        Returns:
            Document text, or None if no document has been stored yet

        Raises:
            StorageReadError: If the storage cannot be read
        """
        pass

    @abstractmethod
    def write(self, content: str) -> None:
        """Replace the stored document.

        Args:
            content: Complete serialized document

        Raises:
            StorageWriteError: If the document cannot be written
        """
        pass

    @property
    @abstractmethod
    def location(self) -> str:
        """Human readable location used in log events."""
        pass
