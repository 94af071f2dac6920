"""State: a vending machine whose behaviour depends on its current state."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class VendingMachineError(Exception):
    """Raised when an action is not allowed in the machine's current state."""


class State(ABC):
    """One state of a vending machine."""

    def __init__(self, machine: VendingMachine) -> None:
        self.machine = machine

    @abstractmethod
    def add_item(self, count: int) -> None:
        """Restock the machine."""

    @abstractmethod
    def request_item(self) -> None:
        """Select an item."""

    @abstractmethod
    def insert_money(self, money: int) -> None:
        """Pay for the selected item."""

    @abstractmethod
    def dispense_item(self) -> None:
        """Hand out the paid item."""


class HasItemState(State):
    def request_item(self) -> None:
        if self.machine.item_count == 0:
            self.machine.current_state = self.machine.no_item
            raise VendingMachineError("No item present")
        print("Item requestd")
        self.machine.current_state = self.machine.item_requested

    def add_item(self, count: int) -> None:
        print(f"{count} items added")
        self.machine.increment_item_count(count)

    def insert_money(self, money: int) -> None:
        raise VendingMachineError("Please select item first")

    def dispense_item(self) -> None:
        raise VendingMachineError("Please select item first")


class ItemRequestedState(State):
    def request_item(self) -> None:
        raise VendingMachineError("Item already requested")

    def add_item(self, count: int) -> None:
        raise VendingMachineError("Item Dispense in progress")

    def insert_money(self, money: int) -> None:
        # Any amount is accepted, even one below the item price.
        print("Money entered is ok")
        self.machine.current_state = self.machine.has_money

    def dispense_item(self) -> None:
        raise VendingMachineError("Please insert money first")


class HasMoneyState(State):
    def request_item(self) -> None:
        raise VendingMachineError("Item dispense in progress")

    def add_item(self, count: int) -> None:
        raise VendingMachineError("Item dispense in progress")

    def insert_money(self, money: int) -> None:
        raise VendingMachineError("Item out of stock")

    def dispense_item(self) -> None:
        print("Dispensing Item")
        self.machine.item_count -= 1
        if self.machine.item_count == 0:
            self.machine.current_state = self.machine.no_item
        else:
            self.machine.current_state = self.machine.has_item


class NoItemState(State):
    def request_item(self) -> None:
        raise VendingMachineError("Item out of stock")

    def add_item(self, count: int) -> None:
        self.machine.increment_item_count(count)
        self.machine.current_state = self.machine.has_item

    def insert_money(self, money: int) -> None:
        raise VendingMachineError("Item out of stock")

    def dispense_item(self) -> None:
        raise VendingMachineError("Item out of stock")


class VendingMachine:
    """A machine selling one kind of item at a fixed price."""

    def __init__(self, item_count: int, item_price: int) -> None:
        self.item_count = item_count
        self.item_price = item_price
        self.has_item: State = HasItemState(self)
        self.item_requested: State = ItemRequestedState(self)
        self.has_money: State = HasMoneyState(self)
        self.no_item: State = NoItemState(self)
        self.current_state: State = self.has_item

    def request_item(self) -> None:
        self.current_state.request_item()

    def add_item(self, count: int) -> None:
        self.current_state.add_item(count)

    def insert_money(self, money: int) -> None:
        self.current_state.insert_money(money)

    def dispense_item(self) -> None:
        self.current_state.dispense_item()

    def increment_item_count(self, count: int) -> None:
        print(f"Adding {count} items")
        self.item_count += count


def main(argv: list[str] | None = None) -> None:
    machine = VendingMachine(1, 10)
    try:
        machine.request_item()
        machine.insert_money(10)
        machine.dispense_item()
        print()
        machine.add_item(2)
        print()
        machine.request_item()
        machine.insert_money(10)
        machine.dispense_item()
    except VendingMachineError as err:
        print(err, file=sys.stderr)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()