"""Adapter: plugging a Lightning connector into a USB-only machine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Computer(ABC):
    """A machine that accepts a Lightning connector."""

    @abstractmethod
    def insert_into_lightning_port(self) -> None:
        """Accept a Lightning connector."""


class Mac(Computer):
    """A machine with a native Lightning port."""

    def insert_into_lightning_port(self) -> None:
        print("Lightning connector is plugged into mac machine.")


@dataclass
class Windows:
    """A machine that only has a USB port."""

    usb_connected: bool = False

    def insert_into_usb_port(self) -> None:
        """Plug a USB connector in and note that the port is in use."""
        self.usb_connected = True
        print("USB connector is plugged into windows machine.")


@dataclass
class WindowsAdapter(Computer):
    """Lets a Windows machine accept a Lightning connector."""

    window_machine: Windows

    def insert_into_lightning_port(self) -> None:
        print("Adapter converts Lightning signal to USB.")
        self.window_machine.insert_into_usb_port()


class Client:
    """Someone holding a Lightning connector."""

    def insert_lightning_connector_into_computer(self, computer: Computer) -> None:
        print("Client inserts Lightning connector into computer.")
        computer.insert_into_lightning_port()


def main(argv: list[str] | None = None) -> None:
    client = Client()
    client.insert_lightning_connector_into_computer(Mac())
    client.insert_lightning_connector_into_computer(WindowsAdapter(Windows()))


if __name__ == "__main__":
    main()