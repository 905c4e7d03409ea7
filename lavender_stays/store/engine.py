"""Whole-document record store.

Every operation reads the entire document from storage, changes one
collection in memory and writes the entire document back. Nothing is
cached between calls.
"""

import json
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, Optional, TypeVar

from structlog import get_logger

from lavender_stays.models import AppData
from lavender_stays.models.base import StoredRecord
from lavender_stays.storage import DocumentStorage, StorageError, StorageWriteError
from lavender_stays.store.seed import build_seed_document

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=StoredRecord)


class RecordNotFoundError(Exception):
    """Raised when no record with the given id exists in a collection."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{record_id} not found in {collection}")


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string with microseconds and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def new_record_id(prefix: str = "") -> str:
    """Generate a record id such as ``room_3f2a...``."""
    return f"{prefix}{uuid.uuid4().hex}"


class RecordStore:
    """Single source of truth for every hotel collection.

    All read-modify-write cycles of one store instance run under a single
    writer lock, so concurrent requests in one process cannot overwrite
    each other's changes. Separate processes sharing one file are not
    coordinated.
    """

    def __init__(
        self,
        storage: DocumentStorage,
        seed_factory: Callable[[str], AppData] = build_seed_document,
        clock: Callable[[], str] = utc_now,
        id_factory: Callable[[str], str] = new_record_id,
    ):
        """Initialize the store.

        Args:
            storage: Backend holding the serialized document
            seed_factory: Builds the fallback document from a timestamp
            clock: Returns the current time as an ISO string
            id_factory: Builds a new record id from an entity prefix
        """
        self.storage = storage
        self.seed_factory = seed_factory
        self.clock = clock
        self.id_factory = id_factory
        self._lock = threading.RLock()

    # ---- whole-document I/O ----

    def load(self) -> AppData:
        """Read and parse the whole document.

        A missing document is created from the seed and persisted right away.
        Unreadable, empty or non-JSON documents fall back to the seed without
        being persisted; the next successful write replaces them. Records
        that fail validation are hidden from callers but written back
        unchanged on the next save.

        Returns:
            Parsed document (a fresh object on every call)
        """
        with self._lock:
            try:
                raw = self.storage.read()
            except StorageError as e:
                logger.error(
                    "Failed to read data document, using seed data",
                    location=self.storage.location,
                    error=str(e),
                )
                return self.seed_factory(self.clock())

            if raw is None:
                logger.info(
                    "Data document not found, creating it with seed data",
                    location=self.storage.location,
                )
                data = self.seed_factory(self.clock())
                try:
                    self.save(data)
                except StorageError:
                    logger.warning(
                        "Could not persist seed data, continuing in memory",
                        location=self.storage.location,
                    )
                return data

            if not raw.strip():
                logger.warning(
                    "Data document is empty, using seed data",
                    location=self.storage.location,
                )
                return self.seed_factory(self.clock())

            try:
                document = json.loads(raw)
            except ValueError as e:
                logger.error(
                    "Data document is not valid JSON, using seed data",
                    location=self.storage.location,
                    error=str(e),
                )
                return self.seed_factory(self.clock())

            if not isinstance(document, dict):
                logger.error(
                    "Data document is not a JSON object, using seed data",
                    location=self.storage.location,
                    document_type=type(document).__name__,
                )
                return self.seed_factory(self.clock())

            data = AppData.from_document(document)
            if data.unreadable_records:
                logger.warning(
                    "Data document has invalid records, keeping them aside",
                    location=self.storage.location,
                    unreadable={
                        key: len(value) if isinstance(value, list) else 1
                        for key, value in data.unreadable_records.items()
                    },
                )
            return data

    def save(self, data: AppData) -> None:
        """Serialize the whole document and replace the stored copy.

        Serialization finishes before storage is touched, so a failure here
        leaves the previous document intact.

        Raises:
            StorageWriteError: If serialization or the storage write fails
        """
        try:
            content = json.dumps(data.to_document(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Failed to serialize data document", error=str(e))
            raise StorageWriteError(f"Failed to serialize data document: {str(e)}") from e

        with self._lock:
            self.storage.write(content)

    def initialize(self) -> AppData:
        """Make sure a document exists in storage; returns the current document."""
        return self.load()

    @contextmanager
    def transaction(self) -> Iterator[AppData]:
        """Load the document, let the caller mutate it, then persist it.

        The document is only written when the ``with`` block exits without
        an exception.

        Yields:
            Mutable document
        """
        with self._lock:
            data = self.load()
            yield data
            self.save(data)

    # ---- collection helpers ----

    @staticmethod
    def _records(data: AppData, collection: str) -> list[Any]:
        records = getattr(data, collection)
        if records is None:
            records = []
            setattr(data, collection, records)
        return records

    @staticmethod
    def _index_of(records: list[StoredRecord], collection: str, record_id: str) -> int:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(collection, record_id)

    def list_records(self, collection: str) -> list[Any]:
        """Return a snapshot of one collection."""
        return list(self._records(self.load(), collection))

    def find(self, collection: str, record_id: str) -> Optional[Any]:
        """Return the first record with ``record_id``, or None."""
        for record in self.list_records(collection):
            if record.id == record_id:
                return record
        return None

    def insert(
        self,
        collection: str,
        model: type[RecordT],
        fields: dict[str, Any],
        id_prefix: str,
        stamped_fields: tuple[str, ...] = (),
    ) -> RecordT:
        """Append a new record to a collection.

        Args:
            collection: AppData attribute name (e.g. "rooms")
            model: Stored record model for the collection
            fields: Validated camelCase fields of the new record
            id_prefix: Prefix of the generated id
            stamped_fields: Extra timestamp fields set to the creation time

        Returns:
            The stored record
        """
        now = self.clock()
        with self.transaction() as data:
            records = self._records(data, collection)
            taken = {record.id for record in records} | data.unreadable_ids(collection)
            record_id = self.id_factory(id_prefix)
            while record_id in taken:
                record_id = self.id_factory(id_prefix)

            stamps = {name: now for name in stamped_fields}
            record = model.model_validate(
                {**fields, **stamps, "id": record_id, "createdAt": now, "updatedAt": now}
            )
            records.append(record)

        logger.info("Record created", collection=collection, record_id=record_id)
        return record

    def update(
        self,
        collection: str,
        record_id: str,
        mutate: Callable[[dict[str, Any], str], dict[str, Any]],
    ) -> Any:
        """Apply ``mutate`` to one record and persist it.

        Args:
            collection: AppData attribute name
            record_id: Id of the record to change (first match wins)
            mutate: Receives the record's camelCase fields and the current
                timestamp, returns the new fields. ``updatedAt`` is always
                refreshed afterwards.

        Returns:
            The updated record

        Raises:
            RecordNotFoundError: If no record has ``record_id``
            pydantic.ValidationError: If ``mutate`` produces invalid fields
        """
        now = self.clock()
        with self.transaction() as data:
            records = self._records(data, collection)
            index = self._index_of(records, collection, record_id)
            current = records[index]
            fields = mutate(current.to_document(), now)
            fields["id"] = current.id
            fields["updatedAt"] = now
            updated = type(current).model_validate(fields)
            records[index] = updated

        logger.info("Record updated", collection=collection, record_id=record_id)
        return updated

    def delete(self, collection: str, record_id: str) -> Any:
        """Remove one record from a collection and persist.

        Returns:
            The removed record

        Raises:
            RecordNotFoundError: If no record has ``record_id``
        """
        with self.transaction() as data:
            records = self._records(data, collection)
            index = self._index_of(records, collection, record_id)
            removed = records.pop(index)

        logger.info("Record deleted", collection=collection, record_id=record_id)
        return removed
