# pizzasim

A small pizzeria simulator for the terminal. You can browse a menu of
pizzas, drinks, side dishes and toppings, register customers, place
orders and review every order placed during the session.

## Installation

```
pip install .
```

## Running

```
pizzasim
```

The same loop also starts with `python -m pizzasim.cli`.

The main menu offers:

1. View Menu: lists pizzas, drinks, side dishes and toppings with prices
2. Place Order: pick a customer and an order type (dine-in, takeout or
   delivery), then add pizzas (with size, base and toppings), drinks and
   side dishes
3. Add Customer: enter a name and contact details
4. View Orders: shows every order with its total
5. Exit

A choice that is not a number is rejected and the menu is shown again.
The program also stops when its input runs out.

## Default menu

- Pizzas: Margherita (10, medium, traditional), Pepperoni (12, large, thin)
- Drinks: Cola (2, 0.5L), Juice (2.5, 1L)
- Side dishes: Fries (3, Small), Salad (4, Large)
- Toppings: Cheese (1), Mushrooms (1.5)

## Pricing rules

- Pizza: base price plus toppings. Small costs 0.8 times that amount,
  large costs 1.2 times and medium costs the amount unchanged.
- Drink: fixed price.
- Side dish: a `"Large"` portion costs 1.5 times the base price.
- Delivery orders add a delivery fee of 5.

Prices are shown with up to six significant digits, so 14.4 prints as
`14.4` and 10.0 as `10`.

## Using it as a library

```python
from pizzasim.items import BaseType, Drink, Pizza, Size, Topping
from pizzasim.order import Order, OrderType

pizza = Pizza("Margherita", 10.0, Size.LARGE, BaseType.THIN)
pizza.add_topping(Topping("Cheese", 1.0))

order = Order(1, OrderType.DELIVERY)
order.add_pizza(pizza)
order.add_drink(Drink("Cola", 2.0, "0.5L"))
print(order.calculate_total())
print(order.describe())
```

- `pizzasim.items`: `Topping`, `Size`, `BaseType`, the abstract `MenuItem`
  and its kinds `Pizza`, `Drink` and `SideDish`, each with
  `calculate_price()` and `describe()`.
- `pizzasim.order`: `OrderType`, `Order` (`add_pizza`, `add_drink`,
  `add_side_dish`, `calculate_total`, `describe`) and `Customer`
  (`add_order`, `describe`). Items and orders are copied when added, so
  later changes to the originals do not affect them.
- `pizzasim.menu`: `Menu`, preloaded with the default menu, with
  `add_pizza`, `add_drink`, `add_side_dish`, `add_topping` and `describe`.
- `pizzasim.shop`: `Pizzeria`, holding a menu, customers and placed orders,
  with `add_customer`, `place_order`, `describe_menu`, `describe_orders`
  and the dialogues `create_customer_interactively(stdin, stdout)` and
  `create_order_interactively(stdin, stdout)`.
- `pizzasim.cli`: `run(pizzeria, stdin, stdout)` drives the main menu over
  any pair of text streams; `main()` runs it on standard input and output.

## What it does not do

Everything lives in memory for one session: customers and orders are not
saved anywhere and are gone when the program exits. The menu can be
extended from code but not from the terminal.

## Tests

```
pip install .[test]
pytest
```