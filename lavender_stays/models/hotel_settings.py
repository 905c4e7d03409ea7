"""Pydantic models for the hotel settings singleton."""

from pydantic import EmailStr, Field

from lavender_stays.models.base import RecordInput, StoredRecord

SETTINGS_ID = "singleton"


class HotelSettings(StoredRecord):
    """Hotel-wide settings. At most one record exists, always keyed ``singleton``."""

    id: str = SETTINGS_ID
    hotel_name: str = Field(alias="hotelName")
    contact_email: str = Field(alias="contactEmail")
    contact_phone: str = Field(alias="contactPhone")
    address: str
    enable_online_bookings: bool = Field(True, alias="enableOnlineBookings")
    currency_symbol: str = Field(alias="currencySymbol")


class HotelSettingsInput(RecordInput):
    hotel_name: str = Field(min_length=3, alias="hotelName")
    contact_email: EmailStr = Field(alias="contactEmail")
    contact_phone: str = Field(min_length=10, alias="contactPhone")
    address: str = Field(min_length=10)
    enable_online_bookings: bool = Field(alias="enableOnlineBookings")
    currency_symbol: str = Field(min_length=1, max_length=1, alias="currencySymbol")
