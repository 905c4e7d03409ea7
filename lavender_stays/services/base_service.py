"""Generic per-entity service over the record store."""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ValidationError, create_model
from structlog import get_logger

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.services.results import OperationResult
from lavender_stays.storage import StorageError
from lavender_stays.store import RecordNotFoundError, RecordStore

logger = get_logger(__name__)

Payload = Union[dict[str, Any], BaseModel]


class EntityService:
    """Create/list/update/delete for one collection of the hotel document.

    Subclasses plug in the collection name, the stored and input models,
    the status field and any status side effects. Every public operation
    returns an OperationResult and never raises to the caller:

    1. Validate input (failures never touch storage)
    2. Run one read-modify-write cycle on the store
    3. Convert not-found and storage failures into failure results
    """

    collection: str
    label: str
    id_prefix: str
    model: type[StoredRecord]
    input_model: type[RecordInput]
    status_field: Optional[str] = "status"
    status_type: Any = None
    stamped_fields: tuple[str, ...] = ()

    def __init__(self, store: RecordStore):
        """Initialize the service.

        Args:
            store: Record store shared by every service of the application
        """
        self.store = store
        self.logger = logger.bind(collection=self.collection)
        self._status_model = (
            create_model(f"{self.model.__name__}Status", **{self.status_field: (self.status_type, ...)})
            if self.status_field and self.status_type is not None
            else None
        )

    # ---- messages ----

    @property
    def noun(self) -> str:
        return self.label.lower()

    def created_message(self) -> str:
        return f"{self.label} created successfully!"

    def invalid_message(self) -> str:
        return f"Invalid {self.noun} data. Please check all fields."

    def not_found_message(self, record_id: str) -> str:
        return f"{self.label} with ID {record_id} not found"

    # ---- hooks ----

    def prepare_create(self, validated: RecordInput) -> dict[str, Any]:
        """Turn validated input into the fields of a new record."""
        return validated.to_fields()

    def on_status_change(self, fields: dict[str, Any], new_status: Any, now: str) -> None:
        """Apply side effects of a status transition to ``fields`` in place."""
        pass

    # ---- operations ----

    def _run(
        self,
        operation: str,
        action: Callable[[], Any],
        success_message: Callable[[Any], str],
        record_id: Optional[str] = None,
    ) -> OperationResult:
        """Run a store action and convert its outcome into an OperationResult."""
        try:
            record = action()
            return OperationResult.ok(success_message(record), record)

        except RecordNotFoundError:
            self.logger.warning(
                "Record not found",
                operation=operation,
                record_id=record_id,
            )
            return OperationResult.not_found(self.not_found_message(record_id or ""))

        except ValidationError as e:
            self.logger.warning(
                "Validation failed",
                operation=operation,
                record_id=record_id,
                error_count=e.error_count(),
            )
            return OperationResult.invalid(self.invalid_message(), e)

        except StorageError as e:
            self.logger.error(
                "Storage failure",
                operation=operation,
                record_id=record_id,
                error=str(e),
            )
            return OperationResult.storage_failed()

        except Exception as e:
            self.logger.error(
                "Operation failed with exception",
                operation=operation,
                record_id=record_id,
                error=str(e),
                exc_info=True,
            )
            return OperationResult.storage_failed()

    def list(self) -> list[Any]:
        """Return the whole collection; an empty list if it cannot be read."""
        try:
            return self.store.list_records(self.collection)
        except Exception as e:
            self.logger.error("Failed to list records", error=str(e), exc_info=True)
            return []

    def get(self, record_id: str) -> Optional[Any]:
        try:
            return self.store.find(self.collection, record_id)
        except Exception as e:
            self.logger.error(
                "Failed to fetch record", record_id=record_id, error=str(e), exc_info=True
            )
            return None

    def create(self, payload: Payload) -> OperationResult:
        """Validate ``payload`` and append a new record.

        Args:
            payload: Input model instance, or a dict with camelCase or snake_case keys

        Returns:
            Result carrying the stored record, or validation/storage failure
        """
        try:
            validated = self._validate(payload)
        except ValidationError as e:
            self.logger.warning("Validation failed", operation="create", errors=e.error_count())
            return OperationResult.invalid(self.invalid_message(), e)

        fields = self.prepare_create(validated)
        return self._run(
            "create",
            lambda: self.store.insert(
                self.collection,
                self.model,
                fields,
                self.id_prefix,
                self.stamped_fields,
            ),
            lambda record: self.created_message(),
        )

    def update_status(self, record_id: str, new_status: Any) -> OperationResult:
        """Set the status field of one record and apply its side effects."""
        try:
            status = self._validate_status(new_status)
        except ValidationError as e:
            return OperationResult.invalid(self.invalid_message(), e)

        stored_value = status.value if hasattr(status, "value") else status

        def mutate(fields: dict[str, Any], now: str) -> dict[str, Any]:
            fields[self.status_field] = stored_value
            self.on_status_change(fields, status, now)
            return fields

        return self._run(
            "update_status",
            lambda: self.store.update(self.collection, record_id, mutate),
            lambda record: f"{self.label} status updated to {stored_value}",
            record_id=record_id,
        )

    def update(self, record_id: str, changes: Payload) -> OperationResult:
        """Merge validated partial fields into one record.

        Supplied fields are merged over the stored record and the result is
        validated with the same rules as ``create``. An explicit ``None``
        removes an optional field. A status value is validated like
        ``update_status`` and triggers the same side effects.
        """
        if isinstance(changes, BaseModel):
            changes = changes.model_dump(by_alias=True, exclude_unset=True)
        aliased = self.input_model.alias_keys(changes)
        cleared = [key for key, value in aliased.items() if value is None]

        new_status = None
        if self._status_model is not None and self.status_field in aliased:
            try:
                status = self._validate_status(aliased[self.status_field])
            except ValidationError as e:
                self.logger.warning(
                    "Validation failed", operation="update", record_id=record_id, errors=e.error_count()
                )
                return OperationResult.invalid(self.invalid_message(), e)
            new_status = status.value if hasattr(status, "value") else status

        def mutate(fields: dict[str, Any], now: str) -> dict[str, Any]:
            previous_status = fields.get(self.status_field) if self.status_field else None
            validated = self.input_model.model_validate({**fields, **aliased})
            fields.update(validated.to_fields())
            merged = validated.model_dump(by_alias=True)
            for key in cleared:
                if merged.get(key) is None:
                    fields.pop(key, None)
            if new_status is not None:
                fields[self.status_field] = new_status
            if self.status_field and fields.get(self.status_field) != previous_status:
                self.on_status_change(
                    fields, self._validate_status(fields[self.status_field]), now
                )
            return fields

        return self._run(
            "update",
            lambda: self.store.update(self.collection, record_id, mutate),
            lambda record: f"{self.label} updated successfully!",
            record_id=record_id,
        )

    def delete(self, record_id: str) -> OperationResult:
        return self._run(
            "delete",
            lambda: self.store.delete(self.collection, record_id),
            lambda record: f"{self.label} deleted successfully!",
            record_id=record_id,
        )

    # ---- helpers ----

    def _validate(self, payload: Payload) -> RecordInput:
        if isinstance(payload, self.input_model):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(by_alias=True)
        return self.input_model.model_validate(payload)

    def _validate_status(self, value: Any) -> Any:
        """Validate a status value; errors are reported against the status field."""
        if self._status_model is None:
            raise ValueError(f"{self.label} has no status field")
        validated = self._status_model.model_validate({self.status_field: value})
        return getattr(validated, self.status_field)
