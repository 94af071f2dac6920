"""Visitor: operations on shapes kept outside the shape classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Visitor(ABC):
    """An operation that can be applied to each kind of shape."""

    @abstractmethod
    def visit_square(self, square: Square) -> None:
        """Apply the operation to a square."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        """Apply the operation to a circle."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None:
        """Apply the operation to a rectangle."""


class Shape(ABC):
    """A shape that accepts visitors."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the name of the shape's kind."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the visitor method for this kind of shape."""


@dataclass
class Square(Shape):
    side: int

    def type_name(self) -> str:
        return "Square"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_square(self)


@dataclass
class Circle(Shape):
    radius: int

    def type_name(self) -> str:
        return "Circle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_circle(self)


@dataclass
class Rectangle(Shape):
    l: int  # noqa: E741
    b: int

    def type_name(self) -> str:
        return "rectangle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_rectangle(self)


@dataclass
class AreaCalculator(Visitor):
    """Announces area calculations for each shape and records what it visited."""

    area: int = 0
    visited: list[Shape] = field(default_factory=list)

    def visit_square(self, square: Square) -> None:
        self.visited.append(square)
        print("Calculating area for square")

    def visit_circle(self, circle: Circle) -> None:
        self.visited.append(circle)
        print("Calculating area for circle")

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self.visited.append(rectangle)
        print("Calculating area for rectangle")


@dataclass
class MiddleCoordinates(Visitor):
    """Announces middle-point calculations for each shape and records what it visited."""

    x: int = 0
    y: int = 0
    visited: list[Shape] = field(default_factory=list)

    def visit_square(self, square: Square) -> None:
        self.visited.append(square)
        print("Calculating middle point coordinates for square")

    def visit_circle(self, circle: Circle) -> None:
        self.visited.append(circle)
        print("Calculating middle point coordinates for circle")

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self.visited.append(rectangle)
        print("Calculating middle point coordinates for rectangle")


def main(argv: list[str] | None = None) -> None:
    shapes: list[Shape] = [Square(side=2), Circle(radius=3), Rectangle(l=2, b=3)]

    area_calculator = AreaCalculator()
    for shape in shapes:
        shape.accept(area_calculator)

    print()
    middle_coordinates = MiddleCoordinates()
    for shape in shapes:
        shape.accept(middle_coordinates)


if __name__ == "__main__":
    main()