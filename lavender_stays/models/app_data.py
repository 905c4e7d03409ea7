"""Pydantic model for the whole hotel data document."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from lavender_stays.models.base import StoredRecord
from lavender_stays.models.booking import BookingRequest
from lavender_stays.models.guest_service import GuestServiceRequest
from lavender_stays.models.hotel_settings import HotelSettings
from lavender_stays.models.housekeeping import HousekeepingTask
from lavender_stays.models.restaurant import MenuItem, RestaurantOrder
from lavender_stays.models.room import Room

# Document key -> stored record model, in on-disk order
COLLECTION_MODELS: dict[str, type[StoredRecord]] = {
    "rooms": Room,
    "bookingRequests": BookingRequest,
    "restaurantOrders": RestaurantOrder,
    "menuItems": MenuItem,
    "housekeepingTasks": HousekeepingTask,
    "guestServiceRequests": GuestServiceRequest,
}
SETTINGS_KEY = "hotelSettings"


class AppData(BaseModel):
    """Every collection the back-office manages, persisted as one JSON document.

    Collections missing from an older document load as empty lists. Records
    that fail validation are set aside rather than dropped: they are hidden
    from the services but written back unchanged on every save, together
    with any top-level keys this version does not know.
    """

    rooms: list[Room] = Field(default_factory=list)
    booking_requests: list[BookingRequest] = Field(
        default_factory=list, alias="bookingRequests"
    )
    restaurant_orders: list[RestaurantOrder] = Field(
        default_factory=list, alias="restaurantOrders"
    )
    menu_items: list[MenuItem] = Field(default_factory=list, alias="menuItems")
    housekeeping_tasks: list[HousekeepingTask] = Field(
        default_factory=list, alias="housekeepingTasks"
    )
    guest_service_requests: list[GuestServiceRequest] = Field(
        default_factory=list, alias="guestServiceRequests"
    )
    hotel_settings: Optional[HotelSettings] = Field(None, alias="hotelSettings")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    # Document key -> raw records that failed validation
    _unreadable: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "AppData":
        """Build from a parsed JSON object, validating one record at a time.

        Args:
            document: Parsed top-level JSON object

        Returns:
            Document holding every valid record; invalid ones are kept aside
        """
        values: dict[str, Any] = {}
        unreadable: dict[str, Any] = {}

        for key, model in COLLECTION_MODELS.items():
            items = document.get(key) or []
            if not isinstance(items, list):
                items = [items]
            records = []
            for item in items:
                try:
                    records.append(model.model_validate(item))
                except ValidationError:
                    unreadable.setdefault(key, []).append(item)
            values[key] = records

        raw_settings = document.get(SETTINGS_KEY)
        if raw_settings is not None:
            try:
                values[SETTINGS_KEY] = HotelSettings.model_validate(raw_settings)
            except ValidationError:
                unreadable[SETTINGS_KEY] = raw_settings

        known = set(COLLECTION_MODELS) | {SETTINGS_KEY}
        extras = {key: value for key, value in document.items() if key not in known}

        data = cls.model_validate(values)
        # Set directly so a key spelled like a field name is not read as that field
        data.__pydantic_extra__.update(extras)
        data._unreadable = unreadable
        return data

    @property
    def unreadable_records(self) -> dict[str, Any]:
        """Raw records that failed validation, keyed by document key."""
        return self._unreadable

    def unreadable_ids(self, collection: str) -> set[str]:
        """Ids still claimed by set-aside records of one collection attribute."""
        key = type(self).model_fields[collection].alias or collection
        return {
            item["id"]
            for item in self._unreadable.get(key, [])
            if isinstance(item, dict) and isinstance(item.get("id"), str)
        }

    def to_document(self) -> dict[str, Any]:
        """Convert to the on-disk layout with camelCase keys.

        Returns:
            Dictionary ready for ``json.dumps``; ``hotelSettings`` is null when unset
        """
        collections = {
            "rooms": self.rooms,
            "bookingRequests": self.booking_requests,
            "restaurantOrders": self.restaurant_orders,
            "menuItems": self.menu_items,
            "housekeepingTasks": self.housekeeping_tasks,
            "guestServiceRequests": self.guest_service_requests,
        }
        document: dict[str, Any] = {
            key: [item.to_document() for item in records]
            + list(self._unreadable.get(key, []))
            for key, records in collections.items()
        }
        if self.hotel_settings is not None:
            document[SETTINGS_KEY] = self.hotel_settings.to_document()
        else:
            document[SETTINGS_KEY] = self._unreadable.get(SETTINGS_KEY)
        document.update(self.model_extra or {})
        return document
