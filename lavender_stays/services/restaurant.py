"""Restaurant order and menu services."""

from typing import Union

from lavender_stays.models import (
    FoodCategory,
    FoodType,
    MenuItem,
    MenuItemInput,
    RestaurantOrder,
    RestaurantOrderInput,
    RestaurantOrderStatus,
)
from lavender_stays.services.base_service import EntityService


class RestaurantOrderService(EntityService):
    """Table and room-service orders. ``orderTime`` is stamped at creation."""

    collection = "restaurant_orders"
    label = "Order"
    id_prefix = "order_"
    model = RestaurantOrder
    input_model = RestaurantOrderInput
    status_type = RestaurantOrderStatus
    stamped_fields = ("orderTime",)


class MenuService(EntityService):
    """Menu items.

    Menu items have no lifecycle status; the status operation sets the
    ``popular`` flag instead.
    """

    collection = "menu_items"
    label = "Menu item"
    id_prefix = "menu_"
    model = MenuItem
    input_model = MenuItemInput
    status_field = "popular"
    status_type = bool

    def list_by_category(self, category: Union[FoodCategory, str]) -> list[MenuItem]:
        try:
            category = FoodCategory(category)
        except ValueError:
            self.logger.warning("Unknown food category", category=category)
            return []
        return [item for item in self.list() if item.category == category]

    def list_by_food_type(self, food_type: Union[FoodType, str]) -> list[MenuItem]:
        try:
            food_type = FoodType(food_type)
        except ValueError:
            self.logger.warning("Unknown food type", food_type=food_type)
            return []
        return [item for item in self.list() if item.food_type == food_type]
