"""Local JSON file storage."""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from structlog import get_logger

from lavender_stays.storage.base import DocumentStorage, StorageReadError, StorageWriteError

logger = get_logger(__name__)


class FileStorage(DocumentStorage):
    """Stores the document in one UTF-8 file on local disk.

    Writes go to a temporary file in the same directory which then replaces
    the target with ``os.replace``, so readers see either the old or the
    new document, never a partial one.
    """

    def __init__(self, path: Union[str, Path]):
        """Initialize file storage.

        Args:
            path: Path of the JSON data file. Parent directories are created on first write.
        """
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Data file not found", path=self.location)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to read data file",
                path=self.location,
                error=str(e),
            )
            raise StorageReadError(f"Failed to read {self.location}: {str(e)}") from e

    def write(self, content: str) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(content)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None

            logger.debug(
                "Wrote data file",
                path=self.location,
                size_bytes=len(content.encode("utf-8")),
            )

        except OSError as e:
            logger.error(
                "Failed to write data file",
                path=self.location,
                error=str(e),
            )
            raise StorageWriteError(f"Failed to write {self.location}: {str(e)}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
