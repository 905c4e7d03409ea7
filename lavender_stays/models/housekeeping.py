"""Pydantic models for housekeeping tasks."""

from typing import Optional

from pydantic import Field

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.models.enums import HousekeepingTaskStatus, HousekeepingTaskType, RoomType


class HousekeepingTask(StoredRecord):
    """A cleaning or maintenance job for one room.

    ``last_cleaned`` is only stamped when the task moves to Completed.
    """

    room_id: str = Field(alias="roomId")
    room_type: RoomType = Field(alias="roomType")
    task: HousekeepingTaskType
    status: HousekeepingTaskStatus = HousekeepingTaskStatus.PENDING
    assigned_to: Optional[str] = Field(None, alias="assignedTo")
    notes: Optional[str] = None
    requested_at: str = Field(alias="requestedAt")
    last_cleaned: Optional[str] = Field(None, alias="lastCleaned")


class HousekeepingTaskInput(RecordInput):
    room_id: str = Field(min_length=1, alias="roomId")
    room_type: RoomType = Field(alias="roomType")
    task: HousekeepingTaskType
    status: HousekeepingTaskStatus = HousekeepingTaskStatus.PENDING
    assigned_to: Optional[str] = Field(None, alias="assignedTo")
    notes: Optional[str] = None
