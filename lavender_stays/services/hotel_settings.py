"""Hotel settings singleton service."""

from typing import Any

from pydantic import BaseModel, ValidationError
from structlog import get_logger

from lavender_stays.models import SETTINGS_ID, HotelSettings, HotelSettingsInput
from lavender_stays.services.base_service import Payload
from lavender_stays.services.results import OperationResult
from lavender_stays.storage import StorageError
from lavender_stays.store import RecordStore, build_default_settings

logger = get_logger(__name__)


class HotelSettingsService:
    """Reads and replaces the ``hotelSettings`` singleton."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.logger = logger.bind(collection="hotel_settings")

    def get(self) -> HotelSettings:
        """Return the settings, creating them from defaults if absent.

        Freshly synthesized settings are persisted; if that write fails they
        are still returned so readers keep working.
        """
        current = self.store.load().hotel_settings
        if current is not None and current.id == SETTINGS_ID:
            return current

        self.logger.info("Hotel settings missing, creating defaults")
        try:
            with self.store.transaction() as data:
                if data.hotel_settings is None or data.hotel_settings.id != SETTINGS_ID:
                    data.hotel_settings = build_default_settings(self.store.clock())
                created = data.hotel_settings
            return created

        except StorageError as e:
            self.logger.error("Failed to persist default hotel settings", error=str(e))
            return build_default_settings(self.store.clock())

    def update(self, changes: Payload) -> OperationResult:
        """Validate and store new settings.

        ``changes`` may hold every field or only some; missing fields keep
        their current values. ``id`` stays ``singleton`` and ``createdAt``
        is preserved.
        """
        if isinstance(changes, BaseModel):
            changes = changes.model_dump(by_alias=True, exclude_unset=True)
        current = self.get()
        merged: dict[str, Any] = {
            **current.to_document(),
            **HotelSettingsInput.alias_keys(changes),
        }

        try:
            validated = HotelSettingsInput.model_validate(merged)
        except ValidationError as e:
            self.logger.warning("Validation failed", operation="update", errors=e.error_count())
            return OperationResult.invalid("Invalid settings. Please check all fields.", e)

        try:
            now = self.store.clock()
            with self.store.transaction() as data:
                created_at = (
                    data.hotel_settings.created_at if data.hotel_settings else None
                ) or now
                data.hotel_settings = HotelSettings.model_validate(
                    {
                        **validated.to_fields(),
                        "id": SETTINGS_ID,
                        "createdAt": created_at,
                        "updatedAt": now,
                    }
                )
            self.logger.info("Hotel settings updated")
            return OperationResult.ok("Settings saved successfully!", data.hotel_settings)

        except StorageError as e:
            self.logger.error("Failed to save hotel settings", error=str(e))
            return OperationResult.storage_failed()
