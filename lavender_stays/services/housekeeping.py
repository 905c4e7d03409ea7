"""Housekeeping task service."""

from typing import Any

from lavender_stays.models import HousekeepingTask, HousekeepingTaskInput, HousekeepingTaskStatus
from lavender_stays.services.base_service import EntityService


class HousekeepingService(EntityService):
    """Cleaning and maintenance tasks. ``requestedAt`` is stamped at creation."""

    collection = "housekeeping_tasks"
    label = "Task"
    id_prefix = "task_"
    model = HousekeepingTask
    input_model = HousekeepingTaskInput
    status_type = HousekeepingTaskStatus
    stamped_fields = ("requestedAt",)

    def on_status_change(self, fields: dict[str, Any], new_status: Any, now: str) -> None:
        if new_status == HousekeepingTaskStatus.COMPLETED:
            fields["lastCleaned"] = now
