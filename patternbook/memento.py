"""Memento: saving and restoring an originator's state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Memento:
    """A saved snapshot of state."""

    state: str


@dataclass
class Originator:
    """Holds state that can be snapshotted and restored."""

    state: str

    def create_memento(self) -> Memento:
        return Memento(self.state)

    def restore_memento(self, memento: Memento) -> None:
        self.state = memento.state


@dataclass
class Caretaker:
    """Keeps the history of mementos."""

    mementos: list[Memento] = field(default_factory=list)

    def add_memento(self, memento: Memento) -> None:
        self.mementos.append(memento)

    def get_memento(self, index: int) -> Memento:
        """Return the memento at ``index``; raise IndexError if out of range."""
        return self.mementos[index]


def main(argv: list[str] | None = None) -> None:
    caretaker = Caretaker()
    originator = Originator(state="A")

    for state in ("A", "B", "C"):
        originator.state = state
        print(f"Originator Current State: {originator.state}")
        caretaker.add_memento(originator.create_memento())

    originator.restore_memento(caretaker.get_memento(1))
    print(f"Restored to State: {originator.state}")

    originator.restore_memento(caretaker.get_memento(0))
    print(f"Restored to State: {originator.state}")


if __name__ == "__main__":
    main()