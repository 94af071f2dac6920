"""Prototype: files and folders that can clone themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Inode(ABC):
    """A file-system node that can be printed and cloned."""

    @abstractmethod
    def print(self, indentation: str) -> None:
        """Print the node with the given indentation."""

    @abstractmethod
    def clone(self) -> Inode:
        """Return a deep copy with renamed nodes."""


@dataclass
class File(Inode):
    name: str

    def print(self, indentation: str) -> None:
        print(indentation + self.name)

    def clone(self) -> File:
        return File(self.name + "_clone")


@dataclass
class Folder(Inode):
    name: str
    children: list[Inode] = field(default_factory=list)

    def print(self, indentation: str) -> None:
        """Print this folder, then its children with doubled indentation."""
        print(indentation + self.name)
        for child in self.children:
            child.print(indentation + indentation)

    def clone(self) -> Folder:
        return Folder(
            self.name + "_clone",
            [child.clone() for child in self.children],
        )


def main(argv: list[str] | None = None) -> None:
    folder1 = Folder("Folder1", [File("File1")])
    folder2 = Folder("Folder2", [folder1, File("File2"), File("File3")])

    print("\nPrinting hierarchy for Folder2")
    folder2.print("  ")

    clone_folder = folder2.clone()
    print("\nPrinting hierarchy for clone Folder")
    clone_folder.print("  ")


if __name__ == "__main__":
    main()