"""The pizzeria: its menu, customers, placed orders and the interactive ordering dialogue."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO, TypeVar

from .items import BaseType, Size, Topping, _format_amount
from .menu import Menu
from .order import Customer, Order, OrderType

_T = TypeVar("_T")

_ORDER_TYPES = {1: OrderType.DINE_IN, 2: OrderType.TAKEOUT, 3: OrderType.DELIVERY}
_SIZES = {1: Size.SMALL, 2: Size.MEDIUM, 3: Size.LARGE}
_BASE_TYPES = {1: BaseType.THIN, 2: BaseType.TRADITIONAL, 3: BaseType.THICK}


def _read_line(stdin: TextIO) -> str:
    """Read one line without its line ending; raise EOFError at end of input."""
    line = stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line.rstrip("\r\n")


def _read_token(stdin: TextIO) -> str:
    """Return the first word of the next non-blank line."""
    while True:
        words = _read_line(stdin).split()
        if words:
            return words[0]


def _read_int(stdin: TextIO) -> int | None:
    """Read a number; return None if what was typed is not one."""
    try:
        return int(_read_token(stdin))
    except ValueError:
        return None


def _read_yes(stdin: TextIO) -> bool:
    return _read_token(stdin)[0] in "yY"


def _pick_repeatedly(
    stdin: TextIO,
    stdout: TextIO,
    noun: str,
    heading: str,
    options: Sequence[_T],
    render: Callable[[_T], str],
) -> Iterator[_T]:
    """Ask "Add a <noun>?" until declined, yielding each valid selection."""
    while True:
        stdout.write(f"\nAdd a {noun}? (y/n): ")
        if not _read_yes(stdin):
            return
        stdout.write(f"\nAvailable {heading}:\n")
        for number, option in enumerate(options, start=1):
            stdout.write(f"{number}. {render(option)}\n")
        stdout.write(f"Select {noun} by number: ")
        index = _read_int(stdin)
        if index is None or not 1 <= index <= len(options):
            stdout.write(f"Invalid {noun} selection.\n")
            continue
        yield options[index - 1]


def _render_topping(topping: Topping) -> str:
    return f"{topping.name} (${_format_amount(topping.price)})"


class Pizzeria:
    """A pizzeria with a menu, its customers and every order placed."""

    def __init__(self) -> None:
        self.menu = Menu()
        self.customers: list[Customer] = []
        self.orders: list[Order] = []
        self.next_order_id = 1

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)

    def place_order(self, customer: Customer, order: Order) -> None:
        """Record the order and attach it to every customer of the same name."""
        self.orders.append(copy.deepcopy(order))
        for known in self.customers:
            if known.name == customer.name:
                known.add_order(order)
        self.next_order_id += 1

    def describe_menu(self) -> str:
        return self.menu.describe()

    def describe_orders(self) -> str:
        return "\nAll Orders:\n" + "".join(order.describe() for order in self.orders)

    def create_customer_interactively(self, stdin: TextIO, stdout: TextIO) -> Customer:
        """Ask for a name and contact details and register the new customer."""
        stdout.write("\nEnter customer name: ")
        name = _read_line(stdin)
        stdout.write("Enter contact info (e.g., email or phone): ")
        contact = _read_line(stdin)
        customer = Customer(name, contact)
        self.add_customer(customer)
        stdout.write(f"Customer '{name}' added.\n")
        return customer

    def create_order_interactively(self, stdin: TextIO, stdout: TextIO) -> Order | None:
        """Walk through building an order; return it once placed, or None if abandoned."""
        if not self.customers:
            stdout.write("No customers available. Please add a customer first.\n")
            return None

        stdout.write("\nAvailable customers:\n")
        for number, customer in enumerate(self.customers, start=1):
            stdout.write(f"{number}. {customer.name} ({customer.contact_info})\n")
        stdout.write("Select customer by number: ")
        index = _read_int(stdin)
        if index is None or not 1 <= index <= len(self.customers):
            stdout.write("Invalid customer selection.\n")
            return None
        customer = self.customers[index - 1]

        stdout.write("\nSelect order type:\n1. Dine-in\n2. Takeout\n3. Delivery\n")
        order_type = _ORDER_TYPES.get(_read_int(stdin))
        if order_type is None:
            stdout.write("Invalid order type.\n")
            return None

        order = Order(self.next_order_id, order_type)

        for chosen in _pick_repeatedly(
            stdin, stdout, "pizza", "pizzas", self.menu.pizzas, lambda p: p.describe()
        ):
            pizza = copy.deepcopy(chosen)

            stdout.write("\nSelect size:\n1. Small\n2. Medium\n3. Large\n")
            size = _SIZES.get(_read_int(stdin))
            if size is None:
                stdout.write("Invalid size, using Medium.\n")
            else:
                pizza.size = size

            stdout.write("\nSelect base type:\n1. Thin\n2. Traditional\n3. Thick\n")
            base_type = _BASE_TYPES.get(_read_int(stdin))
            if base_type is None:
                stdout.write("Invalid base type, using Traditional.\n")
            else:
                pizza.base_type = base_type

            for topping in _pick_repeatedly(
                stdin, stdout, "topping", "toppings", self.menu.toppings, _render_topping
            ):
                pizza.add_topping(topping)

            order.add_pizza(pizza)

        for drink in _pick_repeatedly(
            stdin, stdout, "drink", "drinks", self.menu.drinks, lambda d: d.describe()
        ):
            order.add_drink(drink)

        for side_dish in _pick_repeatedly(
            stdin,
            stdout,
            "side dish",
            "side dishes",
            self.menu.side_dishes,
            lambda s: s.describe(),
        ):
            order.add_side_dish(side_dish)

        self.place_order(customer, order)
        stdout.write("\nOrder placed successfully!\n")
        stdout.write(order.describe())
        return order