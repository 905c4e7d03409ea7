"""Pydantic models for booking requests."""

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.models.enums import BookingStatus, RoomType


def _iso_date(value: str) -> str:
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise ValueError("Date must use the YYYY-MM-DD format.") from e
    return value


IsoDate = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$"), AfterValidator(_iso_date)]


class BookingRequest(StoredRecord):
    """A guest's booking request as stored in the data document.

    ``room_id`` is a weak reference: it is never checked against the room
    collection, and deleting a room leaves its bookings in place.
    """

    guest_name: str = Field(alias="guestName")
    guest_email: str = Field(alias="guestEmail")
    check_in_date: str = Field(alias="checkInDate")
    check_out_date: str = Field(alias="checkOutDate")
    number_of_guests: int = Field(alias="numberOfGuests")
    room_type: RoomType = Field(alias="roomType")
    room_id: str = Field(alias="roomId")
    total_price: float = Field(alias="totalPrice")
    status: BookingStatus = BookingStatus.PENDING


class BookingInput(RecordInput):
    """Booking payload accepted by the store.

    Date ordering is not checked here; the public booking form does that
    before calling the store.
    """

    guest_name: str = Field(min_length=2, alias="guestName")
    guest_email: EmailStr = Field(alias="guestEmail")
    check_in_date: IsoDate = Field(alias="checkInDate")
    check_out_date: IsoDate = Field(alias="checkOutDate")
    number_of_guests: int = Field(ge=1, alias="numberOfGuests")
    room_id: str = Field(alias="roomId")
    room_type: RoomType = Field(alias="roomType")
    total_price: float = Field(alias="totalPrice")
