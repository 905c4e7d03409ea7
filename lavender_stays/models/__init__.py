"""Hotel data document models."""

from lavender_stays.models.app_data import AppData
from lavender_stays.models.booking import BookingInput, BookingRequest
from lavender_stays.models.enums import (
    BookingStatus,
    FoodCategory,
    FoodType,
    GuestServiceStatus,
    GuestServiceType,
    HousekeepingTaskStatus,
    HousekeepingTaskType,
    RestaurantOrderStatus,
    RoomStatus,
    RoomType,
)
from lavender_stays.models.guest_service import GuestServiceRequest, GuestServiceRequestInput
from lavender_stays.models.hotel_settings import SETTINGS_ID, HotelSettings, HotelSettingsInput
from lavender_stays.models.housekeeping import HousekeepingTask, HousekeepingTaskInput
from lavender_stays.models.restaurant import (
    MenuItem,
    MenuItemInput,
    OrderItem,
    RestaurantOrder,
    RestaurantOrderInput,
)
from lavender_stays.models.room import PLACEHOLDER_IMAGE_URL, Room, RoomInput
from lavender_stays.models.suggestion import DateSuggestion, DateSuggestionRequest

__all__ = [
    "AppData",
    "Room",
    "RoomInput",
    "PLACEHOLDER_IMAGE_URL",
    "BookingRequest",
    "BookingInput",
    "RestaurantOrder",
    "RestaurantOrderInput",
    "OrderItem",
    "MenuItem",
    "MenuItemInput",
    "HousekeepingTask",
    "HousekeepingTaskInput",
    "GuestServiceRequest",
    "GuestServiceRequestInput",
    "HotelSettings",
    "HotelSettingsInput",
    "SETTINGS_ID",
    "DateSuggestion",
    "DateSuggestionRequest",
    "RoomType",
    "RoomStatus",
    "BookingStatus",
    "RestaurantOrderStatus",
    "FoodCategory",
    "FoodType",
    "HousekeepingTaskType",
    "HousekeepingTaskStatus",
    "GuestServiceType",
    "GuestServiceStatus",
]
