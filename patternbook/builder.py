"""Builder: a director assembles houses step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class House:
    """The finished product."""

    window_type: str = ""
    door_type: str = ""
    floor: int = 0


class HouseBuilder(ABC):
    """Builds the parts of a house and hands the result over."""

    def __init__(self) -> None:
        self.window_type = ""
        self.door_type = ""
        self.floor = 0

    @abstractmethod
    def build_window(self) -> None:
        """Choose the window type."""

    @abstractmethod
    def build_door(self) -> None:
        """Choose the door type."""

    @abstractmethod
    def build_floors(self) -> None:
        """Choose the number of floors."""

    def house(self) -> House:
        """Return the house built so far."""
        return House(
            window_type=self.window_type,
            door_type=self.door_type,
            floor=self.floor,
        )


class NormalBuilder(HouseBuilder):
    def build_window(self) -> None:
        self.window_type = "Wooden Window"

    def build_door(self) -> None:
        self.door_type = "Wooden Door"

    def build_floors(self) -> None:
        self.floor = 2


class IglooBuilder(HouseBuilder):
    def build_window(self) -> None:
        self.window_type = "Snow Window"

    def build_door(self) -> None:
        self.door_type = "Snow Door"

    def build_floors(self) -> None:
        self.floor = 1


class Director:
    """Runs a builder through the construction steps."""

    def __init__(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def build_house(self) -> House:
        self.builder.build_door()
        self.builder.build_window()
        self.builder.build_floors()
        return self.builder.house()


_BUILDERS: dict[str, type[HouseBuilder]] = {
    "normal": NormalBuilder,
    "igloo": IglooBuilder,
}


def get_builder(builder_type: str) -> HouseBuilder:
    """Return a fresh builder of the given type; raise ValueError otherwise."""
    try:
        return _BUILDERS[builder_type]()
    except KeyError:
        raise ValueError(f"Unknown builder type: {builder_type!r}") from None


def main(argv: list[str] | None = None) -> None:
    normal_builder = get_builder("normal")
    igloo_builder = get_builder("igloo")

    director = Director(normal_builder)
    normal_house = director.build_house()
    print(f"Normal House Door Type: {normal_house.door_type}")
    print(f"Normal House Window Type: {normal_house.window_type}")
    print(f"Normal House Num Floor: {normal_house.floor}")

    director.builder = igloo_builder
    igloo_house = director.build_house()
    print(f"\nIgloo House Door Type: {igloo_house.door_type}")
    print(f"Igloo House Window Type: {igloo_house.window_type}")
    print(f"Igloo House Num Floor: {igloo_house.floor}")


if __name__ == "__main__":
    main()