"""Interactive pizzeria simulator: menu items, orders, customers, the shop and a terminal front end."""

__version__ = "0.1.0"