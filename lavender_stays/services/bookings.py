"""Booking request service."""

from typing import Any

from lavender_stays.models import BookingInput, BookingRequest, BookingStatus
from lavender_stays.models.base import RecordInput
from lavender_stays.services.base_service import EntityService


class BookingService(EntityService):
    """Booking requests submitted by guests and handled by the front desk.

    New bookings always start PENDING, whatever status the caller sent.
    ``roomId`` is stored as given without checking the room exists.
    """

    collection = "booking_requests"
    label = "Booking"
    id_prefix = "bk_"
    model = BookingRequest
    input_model = BookingInput
    status_type = BookingStatus

    def created_message(self) -> str:
        return "Booking request submitted successfully!"

    def invalid_message(self) -> str:
        return "Invalid data provided. Please check the fields and try again."

    def prepare_create(self, validated: RecordInput) -> dict[str, Any]:
        fields = validated.to_fields()
        fields["status"] = BookingStatus.PENDING.value
        return fields
