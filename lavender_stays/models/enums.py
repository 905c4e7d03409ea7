"""Enumerated vocabularies stored in the hotel data document.

Values are persisted verbatim, so they must match the strings already
present in existing data files exactly (including case and spacing).
"""

from enum import Enum


class RoomType(str, Enum):
    """Room categories offered by the hotel."""

    STANDARD_TWIN = "STANDARD_TWIN"
    DELUXE_QUEEN = "DELUXE_QUEEN"
    LUXURY_KING_SUITE = "LUXURY_KING_SUITE"
    FAMILY_SUITE = "FAMILY_SUITE"
    EXECUTIVE_SUITE = "EXECUTIVE_SUITE"
    PRESIDENTIAL_SUITE = "PRESIDENTIAL_SUITE"


class RoomStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"
    CLEANING = "CLEANING"


class BookingStatus(str, Enum):
    """Booking request lifecycle.

    - PENDING: submitted by a guest, waiting for the front desk
    - CONFIRMED / REJECTED: front desk decision
    - CANCELLED: withdrawn after submission
    - COMPLETED: stay finished
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class RestaurantOrderStatus(str, Enum):
    PENDING = "Pending"
    PREPARING = "Preparing"
    SERVED = "Served"
    PAID = "Paid"


class FoodCategory(str, Enum):
    SNACKS = "Snacks"
    MAIN_COURSE = "Main Course"
    DESSERT = "Dessert"


class FoodType(str, Enum):
    VEGETARIAN = "Vegetarian"
    NON_VEGETARIAN = "Non-Vegetarian"


class HousekeepingTaskType(str, Enum):
    FULL_CLEAN = "Full Clean"
    TOWEL_CHANGE = "Towel Change"
    TURNDOWN_SERVICE = "Turndown Service"
    MAINTENANCE_CHECK = "Maintenance Check"


class HousekeepingTaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    BLOCKED = "Blocked"


class GuestServiceType(str, Enum):
    LAUNDRY = "Laundry"
    CAB_BOOKING = "Cab Booking"
    SPA_APPOINTMENT = "Spa Appointment"
    CONCIERGE = "Concierge"
    WAKE_UP_CALL = "Wake-up Call"


class GuestServiceStatus(str, Enum):
    REQUESTED = "Requested"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
