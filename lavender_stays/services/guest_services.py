"""Guest service request service."""

from typing import Any

from lavender_stays.models import (
    GuestServiceRequest,
    GuestServiceRequestInput,
    GuestServiceStatus,
)
from lavender_stays.services.base_service import EntityService


class GuestServiceRequestService(EntityService):
    """Laundry, cab, spa, concierge and wake-up requests."""

    collection = "guest_service_requests"
    label = "Service request"
    id_prefix = "service_"
    model = GuestServiceRequest
    input_model = GuestServiceRequestInput
    status_type = GuestServiceStatus
    stamped_fields = ("requestedAt",)

    def on_status_change(self, fields: dict[str, Any], new_status: Any, now: str) -> None:
        if new_status == GuestServiceStatus.COMPLETED:
            fields["completedAt"] = now
