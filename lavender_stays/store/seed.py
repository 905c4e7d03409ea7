"""Seed content written when no data document exists yet."""

from typing import Any

from lavender_stays.models import AppData, BookingRequest, HotelSettings, Room
from lavender_stays.models.hotel_settings import SETTINGS_ID

SEED_ROOMS: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Deluxe Queen Serenity",
        "type": "DELUXE_QUEEN",
        "pricePerNight": 18000,
        "capacity": 2,
        "amenities": ["WiFi", "Air Conditioning", "HD TV", "Rain Shower"],
        "imageUrl": "https://placehold.co/600x400.png",
        "data-ai-hint": "modern bedroom",
        "availabilityScore": 75,
        "description": (
            "A beautifully appointed room with a queen-size bed, perfect for "
            "couples or solo travelers seeking comfort and style."
        ),
        "status": "AVAILABLE",
    },
    {
        "id": "2",
        "name": "Luxury King Panorama Suite",
        "type": "LUXURY_KING_SUITE",
        "pricePerNight": 32000,
        "capacity": 3,
        "amenities": ["WiFi", "Air Conditioning", "HD TV", "Mini Bar", "Jacuzzi Tub", "City View"],
        "imageUrl": "https://placehold.co/600x400.png",
        "data-ai-hint": "luxury suite",
        "availabilityScore": 45,
        "description": (
            "Experience ultimate luxury in our King Suite, featuring a spacious "
            "layout, premium amenities, and breathtaking panoramic views."
        ),
        "status": "OCCUPIED",
    },
    {
        "id": "3",
        "name": "Standard Twin Comfort",
        "type": "STANDARD_TWIN",
        "pricePerNight": 15000,
        "capacity": 2,
        "amenities": ["WiFi", "Air Conditioning", "Work Desk"],
        "imageUrl": "https://placehold.co/600x400.png",
        "data-ai-hint": "twin beds",
        "availabilityScore": 90,
        "description": (
            "Ideal for friends or colleagues, this room offers two comfortable "
            "twin beds and all essential amenities for a pleasant stay."
        ),
        "status": "MAINTENANCE",
    },
    {
        "id": "4",
        "name": "Family Garden Retreat",
        "type": "FAMILY_SUITE",
        "pricePerNight": 28000,
        "capacity": 4,
        "amenities": ["WiFi", "Air Conditioning", "HD TV", "Kitchenette", "Balcony"],
        "imageUrl": "https://placehold.co/600x400.png",
        "data-ai-hint": "family room",
        "availabilityScore": 60,
        "description": (
            "Spacious and welcoming, our Family Suite provides ample space and "
            "comfort for families, with an added kitchenette and private balcony."
        ),
        "status": "AVAILABLE",
    },
]

SEED_BOOKINGS: list[dict[str, Any]] = [
    {
        "id": "B001",
        "guestName": "Alice Wonderland",
        "guestEmail": "alice@example.com",
        "checkInDate": "2024-09-10",
        "checkOutDate": "2024-09-12",
        "numberOfGuests": 2,
        "roomType": "DELUXE_QUEEN",
        "roomId": "1",
        "totalPrice": 36000,
        "status": "PENDING",
    },
    {
        "id": "B002",
        "guestName": "Bob The Builder",
        "guestEmail": "bob@example.com",
        "checkInDate": "2024-09-15",
        "checkOutDate": "2024-09-18",
        "numberOfGuests": 1,
        "roomType": "LUXURY_KING_SUITE",
        "roomId": "2",
        "totalPrice": 96000,
        "status": "PENDING",
    },
    {
        "id": "B003",
        "guestName": "Charlie Chaplin",
        "guestEmail": "charlie@example.com",
        "checkInDate": "2024-08-20",
        "checkOutDate": "2024-08-22",
        "numberOfGuests": 2,
        "roomType": "STANDARD_TWIN",
        "roomId": "3",
        "totalPrice": 30000,
        "status": "CONFIRMED",
    },
    {
        "id": "B004",
        "guestName": "Diana Prince",
        "guestEmail": "diana@example.com",
        "checkInDate": "2024-10-01",
        "checkOutDate": "2024-10-05",
        "numberOfGuests": 4,
        "roomType": "FAMILY_SUITE",
        "roomId": "4",
        "totalPrice": 112000,
        "status": "PENDING",
    },
]

DEFAULT_HOTEL_SETTINGS: dict[str, Any] = {
    "hotelName": "Lavender Luxury Hotel",
    "contactEmail": "contact@lavenderluxury.com",
    "contactPhone": "+91 98765 43210",
    "address": "123 Lavender Lane, Paradise City, India",
    "enableOnlineBookings": True,
    "currencySymbol": "₹",
}


def build_default_settings(now: str) -> HotelSettings:
    """Build the settings singleton from built-in defaults.

    Args:
        now: ISO timestamp used for createdAt and updatedAt
    """
    return HotelSettings.model_validate(
        {**DEFAULT_HOTEL_SETTINGS, "id": SETTINGS_ID, "createdAt": now, "updatedAt": now}
    )


def build_seed_document(now: str) -> AppData:
    """Build the document written on first start.

    Seed rooms and bookings, default settings, every other collection empty.

    Args:
        now: ISO timestamp stamped on every seed record

    Returns:
        Fresh AppData instance (never shared between calls)
    """
    stamps = {"createdAt": now, "updatedAt": now}
    return AppData(
        rooms=[Room.model_validate({**room, **stamps}) for room in SEED_ROOMS],
        booking_requests=[
            BookingRequest.model_validate({**booking, **stamps}) for booking in SEED_BOOKINGS
        ],
        hotel_settings=build_default_settings(now),
    )
