"""Interactive text menu for the pizzeria simulator."""

from __future__ import annotations

import sys
from typing import TextIO

from .shop import Pizzeria, _read_token

_MAIN_MENU = (
    "\n=== Pizzeria Simulator ===\n"
    "1. View Menu\n"
    "2. Place Order\n"
    "3. Add Customer\n"
    "4. View Orders\n"
    "5. Exit\n"
    "Enter your choice: "
)


def run(pizzeria: Pizzeria, stdin: TextIO, stdout: TextIO) -> None:
    """Serve the main menu until the user exits or input runs out."""
    try:
        while True:
            stdout.write(_MAIN_MENU)
            try:
                choice = int(_read_token(stdin))
            except ValueError:
                stdout.write("Invalid input. Please enter a number.\n")
                continue

            if choice == 1:
                stdout.write(pizzeria.describe_menu())
            elif choice == 2:
                pizzeria.create_order_interactively(stdin, stdout)
            elif choice == 3:
                pizzeria.create_customer_interactively(stdin, stdout)
            elif choice == 4:
                stdout.write(pizzeria.describe_orders())
            elif choice == 5:
                stdout.write("Thank you for using Pizzeria Simulator!\n")
                return
            else:
                stdout.write("Invalid choice. Please try again.\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the simulator on standard input and output."""
    run(Pizzeria(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())