"""In-memory storage, used by tests and throwaway demos."""

from typing import Optional

from lavender_stays.storage.base import DocumentStorage


class InMemoryStorage(DocumentStorage):
    """Keeps the document text in a Python attribute."""

    def __init__(self, content: Optional[str] = None):
        self.content = content
        self.write_count = 0

    @property
    def location(self) -> str:
        return "memory://data.json"

    def read(self) -> Optional[str]:
        return self.content

    def write(self, content: str) -> None:
        self.content = content
        self.write_count += 1
