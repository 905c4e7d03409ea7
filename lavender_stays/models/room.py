"""Pydantic models for hotel rooms."""

from typing import Any, Optional

from pydantic import AliasChoices, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.models.enums import RoomStatus, RoomType

PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400.png"

_http_url = TypeAdapter(HttpUrl)


class Room(StoredRecord):
    """A bookable room as stored in the data document."""

    name: str
    type: RoomType
    price_per_night: float = Field(alias="pricePerNight")
    capacity: int
    amenities: list[str] = Field(default_factory=list)
    image_url: str = Field(default="", alias="imageUrl")
    availability_score: int = Field(
        alias="availabilityScore",
        description="0-100, lower means worse availability",
    )
    description: str = ""
    status: Optional[RoomStatus] = None
    data_ai_hint: Optional[str] = Field(None, alias="data-ai-hint")


class RoomInput(RecordInput):
    """Room form payload used for both creating and editing rooms."""

    name: str = Field(min_length=3)
    type: RoomType
    price_per_night: float = Field(ge=0, alias="pricePerNight")
    capacity: int = Field(ge=1)
    amenities: list[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(None, alias="imageUrl", validate_default=True)
    data_ai_hint: Optional[str] = Field(
        None,
        alias="data-ai-hint",
        validation_alias=AliasChoices("dataAiHint", "data-ai-hint", "data_ai_hint"),
    )
    availability_score: int = Field(ge=0, le=100, alias="availabilityScore")
    description: str = Field(min_length=10)
    status: RoomStatus

    @field_validator("amenities", mode="before")
    @classmethod
    def split_amenities(cls, value: Any) -> Any:
        """Accept the admin form's comma separated string as well as a list."""
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("image_url")
    @classmethod
    def default_image_url(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            return PLACEHOLDER_IMAGE_URL
        try:
            _http_url.validate_python(value)
        except ValidationError as e:
            raise ValueError("Invalid image URL.") from e
        return value
