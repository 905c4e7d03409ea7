"""Guest-facing booking flow: room search, quotes, date suggestions and bookings."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, model_validator
from structlog import get_logger

from lavender_stays.clients import DateSuggestionClient
from lavender_stays.config import settings
from lavender_stays.models import DateSuggestion, DateSuggestionRequest, Room
from lavender_stays.models.booking import IsoDate
from lavender_stays.services.bookings import BookingService
from lavender_stays.services.hotel_settings import HotelSettingsService
from lavender_stays.services.results import OperationResult
from lavender_stays.services.rooms import RoomService
from lavender_stays.store import RecordNotFoundError

logger = get_logger(__name__)

GOOD_VALUE_REASON = "These dates and room offer good value and availability!"
ONLINE_BOOKINGS_DISABLED_MESSAGE = "Online bookings are currently disabled."


def count_nights(check_in: str, check_out: str) -> int:
    """Whole nights between two YYYY-MM-DD dates."""
    return (date.fromisoformat(check_out) - date.fromisoformat(check_in)).days


class StayDates(BaseModel):
    """A check-in/check-out pair where check-out comes strictly later."""

    check_in_date: IsoDate = Field(alias="checkInDate")
    check_out_date: IsoDate = Field(alias="checkOutDate")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "StayDates":
        if count_nights(self.check_in_date, self.check_out_date) < 1:
            raise ValueError("Check-out date must be after check-in date.")
        return self

    @property
    def nights(self) -> int:
        return count_nights(self.check_in_date, self.check_out_date)


class BookingForm(StayDates):
    """What a guest fills in on the public booking page."""

    guest_name: str = Field(min_length=2, alias="guestName")
    guest_email: EmailStr = Field(alias="guestEmail")
    number_of_guests: int = Field(ge=1, alias="numberOfGuests")
    room_id: str = Field(alias="roomId")


class AlternativeDatesQuery(StayDates):
    room_id: str = Field(alias="roomId")
    number_of_guests: int = Field(ge=1, alias="numberOfGuests")


class BookingDesk:
    """Public booking flow layered over the room, booking and settings services.

    The price of a booking is always computed here from the room's nightly
    rate; a price sent by the guest is never trusted.
    """

    def __init__(
        self,
        rooms: RoomService,
        bookings: BookingService,
        hotel_settings: HotelSettingsService,
        suggestion_client: Optional[DateSuggestionClient] = None,
        availability_threshold: Optional[int] = None,
    ):
        self.rooms = rooms
        self.bookings = bookings
        self.hotel_settings = hotel_settings
        self.suggestion_client = suggestion_client or DateSuggestionClient()
        self.availability_threshold = (
            availability_threshold
            if availability_threshold is not None
            else settings.suggestion.availability_threshold
        )

    def search_available_rooms(self, number_of_guests: int) -> list[Room]:
        return self.rooms.list_available(number_of_guests)

    def quote_stay(self, room: Room, check_in: str, check_out: str) -> float:
        """Total price of a stay: nights x price per night.

        Raises:
            ValidationError: If the dates are malformed or out of order
        """
        dates = StayDates(checkInDate=check_in, checkOutDate=check_out)
        return dates.nights * room.price_per_night

    def book(self, form: dict) -> OperationResult:
        """Validate the public booking form and file a PENDING booking request.

        Args:
            form: guestName, guestEmail, checkInDate, checkOutDate, numberOfGuests, roomId

        Returns:
            Result of the booking create, or a refusal when online bookings are off
        """
        try:
            booking = BookingForm.model_validate(form)
        except ValidationError as e:
            logger.warning("Booking form rejected", errors=e.error_count())
            return OperationResult.invalid(self.bookings.invalid_message(), e)

        if not self.hotel_settings.get().enable_online_bookings:
            logger.info("Online booking refused, bookings disabled", room_id=booking.room_id)
            return OperationResult.refused(ONLINE_BOOKINGS_DISABLED_MESSAGE)

        room = self.rooms.get(booking.room_id)
        if room is None:
            return OperationResult.not_found(self.rooms.not_found_message(booking.room_id))

        total_price = booking.nights * room.price_per_night
        logger.info(
            "Submitting online booking",
            room_id=room.id,
            nights=booking.nights,
            total_price=total_price,
        )
        return self.bookings.create(
            {
                "guestName": booking.guest_name,
                "guestEmail": booking.guest_email,
                "checkInDate": booking.check_in_date,
                "checkOutDate": booking.check_out_date,
                "numberOfGuests": booking.number_of_guests,
                "roomId": room.id,
                "roomType": room.type,
                "totalPrice": total_price,
            }
        )

    async def suggest_alternative_dates(self, query: AlternativeDatesQuery) -> DateSuggestion:
        """Recommend whether the guest should look at other dates.

        Rooms whose availability score meets the threshold get a fixed
        "good value" answer without calling the suggestion service.

        Raises:
            RecordNotFoundError: If the room does not exist
            SuggestionClientError: If the suggestion service fails
        """
        room = self.rooms.get(query.room_id)
        if room is None:
            raise RecordNotFoundError(self.rooms.collection, query.room_id)

        if room.availability_score >= self.availability_threshold:
            logger.debug(
                "Availability above threshold, skipping suggestion service",
                room_id=room.id,
                availability_score=room.availability_score,
            )
            return DateSuggestion(shouldSuggestAlternatives=False, reason=GOOD_VALUE_REASON)

        return await self.suggestion_client.suggest_alternative_dates(
            DateSuggestionRequest(
                selectedStartDate=query.check_in_date,
                selectedEndDate=query.check_out_date,
                numberOfGuests=query.number_of_guests,
                currentPrice=room.price_per_night,
                availabilityScore=room.availability_score,
            )
        )
