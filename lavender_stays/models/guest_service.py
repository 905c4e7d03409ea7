"""Pydantic models for guest service requests."""

from typing import Optional

from pydantic import Field

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.models.enums import GuestServiceStatus, GuestServiceType


class GuestServiceRequest(StoredRecord):
    """A guest's request for laundry, transport, spa and similar services."""

    guest_name: str = Field(alias="guestName")
    room_id: str = Field(alias="roomId")
    service_type: GuestServiceType = Field(alias="serviceType")
    details: str = ""
    status: GuestServiceStatus = GuestServiceStatus.REQUESTED
    requested_at: str = Field(alias="requestedAt")
    completed_at: Optional[str] = Field(None, alias="completedAt")


class GuestServiceRequestInput(RecordInput):
    guest_name: str = Field(min_length=2, alias="guestName")
    room_id: str = Field(min_length=1, alias="roomId")
    service_type: GuestServiceType = Field(alias="serviceType")
    details: str = Field(min_length=5)
    status: GuestServiceStatus = GuestServiceStatus.REQUESTED
