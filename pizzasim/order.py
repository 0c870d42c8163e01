"""Orders and the customers who place them."""

from __future__ import annotations

import copy
from enum import Enum

from .items import Drink, Pizza, SideDish, _format_amount


class OrderType(Enum):
    """How the order is served; delivery carries a fee."""

    DINE_IN = "Dine-in"
    TAKEOUT = "Takeout"
    DELIVERY = "Delivery"


DELIVERY_FEE = 5.0


class Order:
    """A numbered order of pizzas, drinks and side dishes."""

    def __init__(self, order_id: int, order_type: OrderType) -> None:
        self.order_id = order_id
        self.order_type = order_type
        self.pizzas: list[Pizza] = []
        self.drinks: list[Drink] = []
        self.side_dishes: list[SideDish] = []

    def add_pizza(self, pizza: Pizza) -> None:
        self.pizzas.append(copy.deepcopy(pizza))

    def add_drink(self, drink: Drink) -> None:
        self.drinks.append(copy.deepcopy(drink))

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes.append(copy.deepcopy(side_dish))

    def calculate_total(self) -> float:
        total = 0.0
        for item in (*self.pizzas, *self.drinks, *self.side_dishes):
            total += item.calculate_price()
        if self.order_type is OrderType.DELIVERY:
            total += DELIVERY_FEE
        return total

    def describe(self) -> str:
        """Return the multi-line order summary, ending with the total."""
        lines = [
            "",
            f"Order #{self.order_id} ({self.order_type.value})",
            "Pizzas:",
            *(p.describe() for p in self.pizzas),
            "Drinks:",
            *(d.describe() for d in self.drinks),
            "Side Dishes:",
            *(s.describe() for s in self.side_dishes),
            f"Total: ${_format_amount(self.calculate_total())}",
        ]
        return "\n".join(lines) + "\n"


class Customer:
    """A customer and the orders they have placed."""

    def __init__(self, name: str, contact_info: str) -> None:
        self.name = name
        self.contact_info = contact_info
        self.orders: list[Order] = []

    def add_order(self, order: Order) -> None:
        self.orders.append(copy.deepcopy(order))

    def describe(self) -> str:
        header = f"\nCustomer: {self.name}, Contact: {self.contact_info}\nOrders:\n"
        return header + "".join(order.describe() for order in self.orders)