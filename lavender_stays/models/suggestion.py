"""Pydantic models for the alternative-dates suggestion service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DateSuggestionRequest(BaseModel):
    """What the guest picked, sent to the suggestion service."""

    selected_start_date: str = Field(alias="selectedStartDate", description="YYYY-MM-DD")
    selected_end_date: str = Field(alias="selectedEndDate", description="YYYY-MM-DD")
    number_of_guests: int = Field(ge=1, alias="numberOfGuests")
    current_price: float = Field(ge=0, alias="currentPrice")
    availability_score: int = Field(ge=0, le=100, alias="availabilityScore")

    model_config = ConfigDict(populate_by_name=True)


class DateSuggestion(BaseModel):
    """The service's recommendation, with optional alternative dates."""

    should_suggest_alternatives: bool = Field(alias="shouldSuggestAlternatives")
    reason: str = ""
    suggested_start_date: Optional[str] = Field(None, alias="suggestedStartDate")
    suggested_end_date: Optional[str] = Field(None, alias="suggestedEndDate")
    suggested_price: Optional[float] = Field(None, alias="suggestedPrice")
    suggested_availability_score: Optional[int] = Field(
        None, alias="suggestedAvailabilityScore"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
