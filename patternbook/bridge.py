"""Bridge: computers and printers vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class Printer(ABC):
    """Something that can print a file."""

    @abstractmethod
    def print_file(self) -> None:
        """Print the file."""


@dataclass
class Epson(Printer):
    """An Epson printer that counts the jobs it has printed."""

    jobs: int = 0

    def print_file(self) -> None:
        self.jobs += 1
        print("Printing by a EPSON Printer")


@dataclass
class Hp(Printer):
    """An HP printer that counts the jobs it has printed."""

    jobs: int = 0

    def print_file(self) -> None:
        self.jobs += 1
        print("Printing by a HP Printer")


class Computer:
    """A computer that sends print requests to its current printer."""

    label: ClassVar[str] = "computer"

    def __init__(self, printer: Printer | None = None) -> None:
        self.printer = printer

    def print(self) -> None:
        """Announce the request and hand it to the attached printer."""
        if self.printer is None:
            raise RuntimeError(f"No printer set for {self.label}")
        print(f"Print request for {self.label}")
        self.printer.print_file()


class Mac(Computer):
    label = "mac"


class Windows(Computer):
    label = "windows"


def main(argv: list[str] | None = None) -> None:
    hp_printer = Hp()
    epson_printer = Epson()

    for computer in (Mac(), Windows()):
        for printer in (hp_printer, epson_printer):
            computer.printer = printer
            computer.print()
            print()


if __name__ == "__main__":
    main()