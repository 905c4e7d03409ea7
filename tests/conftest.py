import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

from lavender_stays.services import BackOffice
from lavender_stays.storage import InMemoryStorage
from lavender_stays.store import RecordStore


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TickingClock:
    """Fake clock that moves forward one second on every call."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> str:
        self.current += timedelta(seconds=1)
        return self.current.isoformat(timespec="microseconds").replace("+00:00", "Z")


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def storage():
    """Empty in-memory storage; the store seeds it on first read."""
    return InMemoryStorage()


@pytest.fixture
def store(storage, clock):
    return RecordStore(storage, clock=clock)


@pytest.fixture
def suggestion_client():
    return Mock()


@pytest.fixture
def office(store, suggestion_client):
    office = BackOffice(store, suggestion_client=suggestion_client)
    office.initialize()
    return office


@pytest.fixture
def legacy_document():
    """Load a data document written by an earlier version of the app."""
    with open(FIXTURES_DIR / "data_document.json", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def suggestion_response():
    """Load a suggestion service response from fixture."""
    with open(FIXTURES_DIR / "suggestion_response.json") as f:
        return json.load(f)


@pytest.fixture
def room_payload():
    return {
        "name": "Test Room",
        "type": "STANDARD_TWIN",
        "pricePerNight": 10000,
        "capacity": 2,
        "amenities": ["WiFi"],
        "imageUrl": "",
        "availabilityScore": 80,
        "description": "A room for testing purposes.",
        "status": "AVAILABLE",
    }


@pytest.fixture
def booking_payload():
    return {
        "guestName": "Eve Tester",
        "guestEmail": "eve@example.com",
        "checkInDate": "2025-01-10",
        "checkOutDate": "2025-01-12",
        "numberOfGuests": 2,
        "roomId": "1",
        "roomType": "STANDARD_TWIN",
        "totalPrice": 20000,
    }


@pytest.fixture
def order_payload():
    return {
        "tableNumber": "T4",
        "items": [
            {"name": "Paneer Tikka", "quantity": 2, "price": 450},
            {"name": "Masala Chai", "quantity": 2, "price": 120},
        ],
        "totalPrice": 1140,
    }


@pytest.fixture
def menu_item_payload():
    return {
        "name": "Gulab Jamun",
        "description": "Warm milk dumplings in rose syrup.",
        "price": 250,
        "category": "Dessert",
        "foodType": "Vegetarian",
    }


@pytest.fixture
def task_payload():
    return {
        "roomId": "2",
        "roomType": "LUXURY_KING_SUITE",
        "task": "Full Clean",
        "assignedTo": "Ravi",
    }


@pytest.fixture
def service_payload():
    return {
        "guestName": "Bob The Builder",
        "roomId": "2",
        "serviceType": "Cab Booking",
        "details": "Airport drop at 6 AM",
    }


@pytest.fixture
def settings_payload():
    return {
        "hotelName": "Lavender Grand",
        "contactEmail": "desk@lavendergrand.com",
        "contactPhone": "+91 99999 11111",
        "address": "42 Orchid Avenue, Paradise City",
        "enableOnlineBookings": True,
        "currencySymbol": "$",
    }
