"""Menu items: pizzas, drinks, side dishes and pizza toppings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


def _format_amount(value: float) -> str:
    """Format a number the way a default-precision stream would (six significant digits)."""
    return f"{value:g}"


@dataclass(frozen=True)
class Topping:
    """A pizza topping with its surcharge."""

    name: str
    price: float


class Size(Enum):
    """Pizza size; small and large change the price."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @property
    def factor(self) -> float:
        return _SIZE_FACTORS[self]


_SIZE_FACTORS = {Size.SMALL: 0.8, Size.MEDIUM: 1.0, Size.LARGE: 1.2}


class BaseType(Enum):
    """Pizza crust."""

    THIN = "Thin"
    TRADITIONAL = "Traditional"
    THICK = "Thick"


class MenuItem(ABC):
    """Anything that can be put on the menu and ordered."""

    def __init__(self, name: str = "Unknown Item", base_price: float = 0.0) -> None:
        self.name = name
        self.base_price = base_price

    @abstractmethod
    def calculate_price(self) -> float:
        """Return the price charged for this item."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description of this item."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.base_price!r})"


class Pizza(MenuItem):
    """A pizza with a size, a crust and any number of toppings."""

    def __init__(
        self,
        name: str,
        base_price: float,
        size: Size = Size.MEDIUM,
        base_type: BaseType = BaseType.TRADITIONAL,
    ) -> None:
        super().__init__(name, base_price)
        self.size = size
        self.base_type = base_type
        self.toppings: list[Topping] = []

    def add_topping(self, topping: Topping) -> None:
        self.toppings.append(topping)

    def calculate_price(self) -> float:
        price = self.base_price
        for topping in self.toppings:
            price += topping.price
        if self.size is not Size.MEDIUM:
            price *= self.size.factor
        return price

    def describe(self) -> str:
        toppings = ", ".join(t.name for t in self.toppings) or "None"
        return (
            f"Pizza: {self.name}, Base Price: ${_format_amount(self.base_price)}"
            f", Size: {self.size.value}, Base: {self.base_type.value}"
            f", Toppings: {toppings}"
            f", Total Price: ${_format_amount(self.calculate_price())}"
        )


class Drink(MenuItem):
    """A drink sold at a fixed price."""

    def __init__(self, name: str, base_price: float, volume: str) -> None:
        super().__init__(name, base_price)
        self.volume = volume

    def calculate_price(self) -> float:
        return self.base_price

    def describe(self) -> str:
        return (
            f"Drink: {self.name}, Volume: {self.volume}"
            f", Price: ${_format_amount(self.calculate_price())}"
        )


class SideDish(MenuItem):
    """A side dish; a "Large" portion costs half as much again."""

    LARGE_PORTION = "Large"
    LARGE_FACTOR = 1.5

    def __init__(self, name: str, base_price: float, portion_size: str) -> None:
        super().__init__(name, base_price)
        self.portion_size = portion_size

    def calculate_price(self) -> float:
        price = self.base_price
        if self.portion_size == self.LARGE_PORTION:
            price *= self.LARGE_FACTOR
        return price

    def describe(self) -> str:
        return (
            f"SideDish: {self.name}, Portion: {self.portion_size}"
            f", Price: ${_format_amount(self.calculate_price())}"
        )