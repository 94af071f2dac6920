"""Observer: customers are told when an item comes back in stock."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Observer(ABC):
    """Something that wants to hear about item updates."""

    id: str

    @abstractmethod
    def update(self, item_name: str) -> None:
        """React to a change of the named item."""


class Subject(ABC):
    """Something that observers can subscribe to."""

    @abstractmethod
    def register(self, observer: Observer) -> None:
        """Add an observer."""

    @abstractmethod
    def deregister(self, observer: Observer) -> None:
        """Remove an observer."""

    @abstractmethod
    def notify_all(self) -> None:
        """Tell every observer about the change."""


@dataclass
class Customer(Observer):
    """A customer who is e-mailed about items."""

    id: str

    def update(self, item_name: str) -> None:
        print(f"Sending email to customer {self.id} for item {item_name}")


@dataclass
class Item(Subject):
    """A shop item that customers can watch."""

    name: str
    observers: list[Observer] = field(default_factory=list)
    in_stock: bool = False

    def update_availability(self) -> None:
        """Mark the item as in stock and notify the observers."""
        print(f"Item {self.name} is now in stock")
        self.in_stock = True
        self.notify_all()

    def register(self, observer: Observer) -> None:
        self.observers.append(observer)

    def deregister(self, observer: Observer) -> None:
        """Remove the first observer with the same id; the last one takes its place."""
        for position, current in enumerate(self.observers):
            if current.id == observer.id:
                self.observers[position] = self.observers[-1]
                self.observers.pop()
                return

    def notify_all(self) -> None:
        for observer in self.observers:
            observer.update(self.name)


def main(argv: list[str] | None = None) -> None:
    shirt_item = Item("Nike Shirt")
    shirt_item.register(Customer(id="first@example.com"))
    shirt_item.register(Customer(id="second@example.com"))
    shirt_item.update_availability()


if __name__ == "__main__":
    main()