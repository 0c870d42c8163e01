"""The pizzeria's menu, preloaded with its standard offerings."""

from __future__ import annotations

import copy

from .items import BaseType, Drink, Pizza, SideDish, Size, Topping, _format_amount


class Menu:
    """Pizzas, drinks, side dishes and toppings on offer."""

    def __init__(self) -> None:
        self.pizzas: list[Pizza] = [
            Pizza("Margherita", 10.0, Size.MEDIUM, BaseType.TRADITIONAL),
            Pizza("Pepperoni", 12.0, Size.LARGE, BaseType.THIN),
        ]
        self.drinks: list[Drink] = [
            Drink("Cola", 2.0, "0.5L"),
            Drink("Juice", 2.5, "1L"),
        ]
        self.side_dishes: list[SideDish] = [
            SideDish("Fries", 3.0, "Small"),
            SideDish("Salad", 4.0, "Large"),
        ]
        self.toppings: list[Topping] = [
            Topping("Cheese", 1.0),
            Topping("Mushrooms", 1.5),
        ]

    def add_pizza(self, pizza: Pizza) -> None:
        self.pizzas.append(copy.deepcopy(pizza))

    def add_drink(self, drink: Drink) -> None:
        self.drinks.append(copy.deepcopy(drink))

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes.append(copy.deepcopy(side_dish))

    def add_topping(self, topping: Topping) -> None:
        self.toppings.append(topping)

    def describe(self) -> str:
        """Return the full menu listing."""
        lines = [
            "",
            "--- Menu ---",
            "Pizzas:",
            *(p.describe() for p in self.pizzas),
            "",
            "Drinks:",
            *(d.describe() for d in self.drinks),
            "",
            "Side Dishes:",
            *(s.describe() for s in self.side_dishes),
            "",
            "Toppings:",
            *(f"{t.name}: ${_format_amount(t.price)}" for t in self.toppings),
        ]
        return "\n".join(lines) + "\n"