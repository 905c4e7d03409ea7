"""Hotel back-office services."""

from lavender_stays.services.back_office import BackOffice
from lavender_stays.services.base_service import EntityService
from lavender_stays.services.booking_desk import (
    GOOD_VALUE_REASON,
    AlternativeDatesQuery,
    BookingDesk,
    BookingForm,
)
from lavender_stays.services.bookings import BookingService
from lavender_stays.services.guest_services import GuestServiceRequestService
from lavender_stays.services.hotel_settings import HotelSettingsService
from lavender_stays.services.housekeeping import HousekeepingService
from lavender_stays.services.restaurant import MenuService, RestaurantOrderService
from lavender_stays.services.results import SAVE_FAILED_MESSAGE, ErrorType, OperationResult
from lavender_stays.services.rooms import RoomService

__all__ = [
    "BackOffice",
    "BookingDesk",
    "BookingForm",
    "AlternativeDatesQuery",
    "GOOD_VALUE_REASON",
    "EntityService",
    "RoomService",
    "BookingService",
    "RestaurantOrderService",
    "MenuService",
    "HousekeepingService",
    "GuestServiceRequestService",
    "HotelSettingsService",
    "OperationResult",
    "ErrorType",
    "SAVE_FAILED_MESSAGE",
]
