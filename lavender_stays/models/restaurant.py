"""Pydantic models for restaurant orders and the menu."""

from typing import Optional

from pydantic import BaseModel, Field

from lavender_stays.models.base import RecordInput, StoredRecord
from lavender_stays.models.enums import FoodCategory, FoodType, RestaurantOrderStatus


class OrderItem(BaseModel):
    """One line of a restaurant order."""

    name: str = Field(min_length=1)
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)


class RestaurantOrder(StoredRecord):
    """A restaurant or room-service order.

    ``table_number`` is free text: a table label or a room number.
    """

    table_number: str = Field(alias="tableNumber")
    items: list[OrderItem] = Field(default_factory=list)
    total_price: float = Field(alias="totalPrice")
    status: RestaurantOrderStatus = RestaurantOrderStatus.PENDING
    order_time: str = Field(alias="orderTime")


class RestaurantOrderInput(RecordInput):
    table_number: str = Field(min_length=1, alias="tableNumber")
    items: list[OrderItem] = Field(min_length=1)
    total_price: float = Field(ge=0, alias="totalPrice")
    status: RestaurantOrderStatus = RestaurantOrderStatus.PENDING


class MenuItem(StoredRecord):
    """A dish on the restaurant menu."""

    name: str
    description: str = ""
    price: float
    category: FoodCategory
    food_type: FoodType = Field(alias="foodType")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    popular: bool = False


class MenuItemInput(RecordInput):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    category: FoodCategory
    food_type: FoodType = Field(alias="foodType")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    popular: bool = False
