import pytest

from pizzasim.items import Drink, Pizza, SideDish, Size, Topping
from pizzasim.order import DELIVERY_FEE, Customer, Order, OrderType


def _filled(order_type):
    order = Order(1, order_type)
    order.add_pizza(Pizza("Margherita", 10.0))
    order.add_drink(Drink("Cola", 2.0, "0.5L"))
    order.add_side_dish(SideDish("Fries", 3.0, "Small"))
    return order


def test_empty_order_totals():
    assert Order(1, OrderType.DINE_IN).calculate_total() == 0.0
    assert Order(1, OrderType.TAKEOUT).calculate_total() == 0.0
    assert Order(1, OrderType.DELIVERY).calculate_total() == DELIVERY_FEE


def test_delivery_fee_value():
    order = Order(1, OrderType.DELIVERY)
    assert order.calculate_total() == 5.0
    order.add_drink(Drink("Cola", 2.0, "0.5L"))
    assert order.calculate_total() == pytest.approx(7.0)


def test_total_is_sum_of_item_prices():
    order = _filled(OrderType.TAKEOUT)
    expected = sum(
        item.calculate_price()
        for item in (*order.pizzas, *order.drinks, *order.side_dishes)
    )
    assert order.calculate_total() == pytest.approx(expected)


def test_delivery_adds_fee_over_takeout():
    delta = _filled(OrderType.DELIVERY).calculate_total() - _filled(
        OrderType.TAKEOUT
    ).calculate_total()
    assert delta == pytest.approx(DELIVERY_FEE)


def test_order_keeps_its_own_copy_of_pizza():
    pizza = Pizza("Pepperoni", 12.0, Size.LARGE)
    order = Order(2, OrderType.DINE_IN)
    order.add_pizza(pizza)
    before = order.calculate_total()
    pizza.add_topping(Topping("Cheese", 1.0))
    assert order.calculate_total() == before
    assert order.pizzas[0].toppings == []


@pytest.mark.parametrize(
    "order_type, label",
    [
        (OrderType.DINE_IN, "Dine-in"),
        (OrderType.TAKEOUT, "Takeout"),
        (OrderType.DELIVERY, "Delivery"),
    ],
)
def test_describe_header(order_type, label):
    text = Order(7, order_type).describe()
    assert text.startswith(f"\nOrder #7 ({label})\n")


def test_describe_sections_in_order():
    text = _filled(OrderType.DINE_IN).describe()
    lines = text.splitlines()
    assert lines[2] == "Pizzas:"
    assert lines[3].startswith("Pizza: Margherita")
    assert lines[4] == "Drinks:"
    assert lines[5] == "Drink: Cola, Volume: 0.5L, Price: $2"
    assert lines[6] == "Side Dishes:"
    assert lines[7] == "SideDish: Fries, Portion: Small, Price: $3"
    assert lines[8].startswith("Total: $")
    assert text.endswith("\n")


def test_customer_holds_orders():
    customer = Customer("Ann", "ann@example.com")
    assert customer.orders == []
    customer.add_order(_filled(OrderType.TAKEOUT))
    customer.add_order(Order(2, OrderType.DELIVERY))
    assert [o.order_id for o in customer.orders] == [1, 2]


def test_customer_describe():
    customer = Customer("Ann", "ann@example.com")
    customer.add_order(Order(3, OrderType.TAKEOUT))
    text = customer.describe()
    assert text.startswith("\nCustomer: Ann, Contact: ann@example.com\nOrders:\n")
    assert "Order #3 (Takeout)" in text


def test_customer_describe_without_orders():
    customer = Customer("Bob", "bob@example.com")
    assert customer.describe().endswith("Orders:\n")