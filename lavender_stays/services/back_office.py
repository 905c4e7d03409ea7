"""Admin back-office operations over every hotel collection."""

from typing import Any, Optional

from lavender_stays.clients import DateSuggestionClient
from lavender_stays.models import (
    BookingRequest,
    GuestServiceRequest,
    HotelSettings,
    HousekeepingTask,
    MenuItem,
    RestaurantOrder,
    Room,
)
from lavender_stays.services.base_service import Payload
from lavender_stays.services.booking_desk import BookingDesk
from lavender_stays.services.bookings import BookingService
from lavender_stays.services.guest_services import GuestServiceRequestService
from lavender_stays.services.hotel_settings import HotelSettingsService
from lavender_stays.services.housekeeping import HousekeepingService
from lavender_stays.services.restaurant import MenuService, RestaurantOrderService
from lavender_stays.services.results import OperationResult
from lavender_stays.services.rooms import RoomService
from lavender_stays.store import RecordStore


class BackOffice:
    """One entry point wiring every entity service to a shared record store."""

    def __init__(
        self,
        store: RecordStore,
        suggestion_client: Optional[DateSuggestionClient] = None,
    ):
        self.store = store
        self.rooms = RoomService(store)
        self.bookings = BookingService(store)
        self.restaurant_orders = RestaurantOrderService(store)
        self.menu = MenuService(store)
        self.housekeeping = HousekeepingService(store)
        self.guest_services = GuestServiceRequestService(store)
        self.hotel_settings = HotelSettingsService(store)
        self.booking_desk = BookingDesk(
            self.rooms, self.bookings, self.hotel_settings, suggestion_client
        )

    def initialize(self) -> None:
        self.store.initialize()

    # Rooms

    def list_rooms(self) -> list[Room]:
        return self.rooms.list()

    def create_room(self, payload: Payload) -> OperationResult:
        return self.rooms.create(payload)

    def update_room_status(self, room_id: str, status: Any) -> OperationResult:
        return self.rooms.update_status(room_id, status)

    def update_room(self, room_id: str, changes: Payload) -> OperationResult:
        return self.rooms.update(room_id, changes)

    def delete_room(self, room_id: str) -> OperationResult:
        return self.rooms.delete(room_id)

    # Bookings

    def list_booking_requests(self) -> list[BookingRequest]:
        return self.bookings.list()

    def create_booking(self, payload: Payload) -> OperationResult:
        return self.bookings.create(payload)

    def update_booking_status(self, booking_id: str, status: Any) -> OperationResult:
        return self.bookings.update_status(booking_id, status)

    def update_booking(self, booking_id: str, changes: Payload) -> OperationResult:
        return self.bookings.update(booking_id, changes)

    def delete_booking(self, booking_id: str) -> OperationResult:
        return self.bookings.delete(booking_id)

    # Restaurant orders

    def list_restaurant_orders(self) -> list[RestaurantOrder]:
        return self.restaurant_orders.list()

    def create_restaurant_order(self, payload: Payload) -> OperationResult:
        return self.restaurant_orders.create(payload)

    def update_order_status(self, order_id: str, status: Any) -> OperationResult:
        return self.restaurant_orders.update_status(order_id, status)

    def update_restaurant_order(self, order_id: str, changes: Payload) -> OperationResult:
        return self.restaurant_orders.update(order_id, changes)

    def delete_order(self, order_id: str) -> OperationResult:
        return self.restaurant_orders.delete(order_id)

    # Menu

    def list_menu_items(self) -> list[MenuItem]:
        return self.menu.list()

    def list_menu_items_by_category(self, category: str) -> list[MenuItem]:
        return self.menu.list_by_category(category)

    def list_menu_items_by_food_type(self, food_type: str) -> list[MenuItem]:
        return self.menu.list_by_food_type(food_type)

    def create_menu_item(self, payload: Payload) -> OperationResult:
        return self.menu.create(payload)

    def update_menu_item_status(self, item_id: str, popular: Any) -> OperationResult:
        """Mark a menu item as popular or not."""
        return self.menu.update_status(item_id, popular)

    def update_menu_item(self, item_id: str, changes: Payload) -> OperationResult:
        return self.menu.update(item_id, changes)

    def delete_menu_item(self, item_id: str) -> OperationResult:
        return self.menu.delete(item_id)

    # Housekeeping

    def list_housekeeping_tasks(self) -> list[HousekeepingTask]:
        return self.housekeeping.list()

    def create_housekeeping_task(self, payload: Payload) -> OperationResult:
        return self.housekeeping.create(payload)

    def update_task_status(self, task_id: str, status: Any) -> OperationResult:
        """Set a task's status; moving to Completed stamps ``lastCleaned``."""
        return self.housekeeping.update_status(task_id, status)

    def update_housekeeping_task(self, task_id: str, changes: Payload) -> OperationResult:
        return self.housekeeping.update(task_id, changes)

    def delete_task(self, task_id: str) -> OperationResult:
        return self.housekeeping.delete(task_id)

    # Guest services

    def list_guest_service_requests(self) -> list[GuestServiceRequest]:
        return self.guest_services.list()

    def create_guest_service_request(self, payload: Payload) -> OperationResult:
        return self.guest_services.create(payload)

    def update_service_status(self, request_id: str, status: Any) -> OperationResult:
        """Set a request's status; moving to Completed stamps ``completedAt``."""
        return self.guest_services.update_status(request_id, status)

    def update_guest_service_request(self, request_id: str, changes: Payload) -> OperationResult:
        return self.guest_services.update(request_id, changes)

    def delete_service_request(self, request_id: str) -> OperationResult:
        return self.guest_services.delete(request_id)

    # Settings

    def get_hotel_settings(self) -> HotelSettings:
        return self.hotel_settings.get()

    def update_hotel_settings(self, changes: Payload) -> OperationResult:
        return self.hotel_settings.update(changes)
