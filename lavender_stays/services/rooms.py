"""Room service."""

from lavender_stays.models import Room, RoomInput, RoomStatus
from lavender_stays.services.base_service import EntityService


class RoomService(EntityService):
    """Rooms offered for booking.

    Deleting a room does not touch bookings or housekeeping tasks that
    reference it.
    """

    collection = "rooms"
    label = "Room"
    id_prefix = "room_"
    model = Room
    input_model = RoomInput
    status_type = RoomStatus

    def created_message(self) -> str:
        return "Room added successfully!"

    def list_available(self, number_of_guests: int) -> list[Room]:
        """Rooms that can host ``number_of_guests`` and are currently AVAILABLE."""
        return [
            room
            for room in self.list()
            if room.capacity >= number_of_guests and room.status == RoomStatus.AVAILABLE
        ]
