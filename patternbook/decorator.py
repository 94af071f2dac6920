"""Decorator: toppings wrap a pizza and add to its price."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Pizza(ABC):
    """Anything with a price."""

    @abstractmethod
    def price(self) -> int:
        """Return the total price."""


class VeggieMania(Pizza):
    def price(self) -> int:
        return 15


@dataclass
class CheeseTopping(Pizza):
    pizza: Pizza

    def price(self) -> int:
        return self.pizza.price() + 10


@dataclass
class TomatoTopping(Pizza):
    pizza: Pizza

    def price(self) -> int:
        return self.pizza.price() + 7


def main(argv: list[str] | None = None) -> None:
    pizza = TomatoTopping(CheeseTopping(VeggieMania()))
    print(f"Price of veggeMania with tomato and cheese topping is {pizza.price()}")


if __name__ == "__main__":
    main()