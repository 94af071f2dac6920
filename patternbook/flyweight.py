"""Flyweight: players share dress objects handed out by one factory."""

from __future__ import annotations

from dataclasses import dataclass, field

TERRORIST_DRESS_TYPE = "tDress"
COUNTER_TERRORIST_DRESS_TYPE = "ctDress"


@dataclass(frozen=True)
class Dress:
    """Shared, immutable dress data."""

    color: str


@dataclass(frozen=True)
class TerroristDress(Dress):
    color: str = "red"


@dataclass(frozen=True)
class CounterTerroristDress(Dress):
    color: str = "green"


_DRESS_TYPES: dict[str, type[Dress]] = {
    TERRORIST_DRESS_TYPE: TerroristDress,
    COUNTER_TERRORIST_DRESS_TYPE: CounterTerroristDress,
}


class DressFactory:
    """Creates each kind of dress once and hands out the same object afterwards."""

    def __init__(self) -> None:
        self.dress_map: dict[str, Dress] = {}

    def get_dress_by_type(self, dress_type: str) -> Dress:
        """Return the shared dress for ``dress_type``; raise ValueError if unknown."""
        try:
            return self.dress_map[dress_type]
        except KeyError:
            pass
        try:
            dress_class = _DRESS_TYPES[dress_type]
        except KeyError:
            raise ValueError("Wrong dress type passed") from None
        dress = self.dress_map[dress_type] = dress_class()
        return dress


_dress_factory = DressFactory()


def get_dress_factory() -> DressFactory:
    """Return the process-wide dress factory."""
    return _dress_factory


@dataclass
class Player:
    """A player wearing a shared dress at some location."""

    dress: Dress
    player_type: str
    lat: int = 0
    long: int = 0

    def new_location(self, lat: int, long: int) -> None:
        self.lat = lat
        self.long = long


def new_player(player_type: str, dress_type: str) -> Player:
    """Create a player wearing the shared dress of ``dress_type``."""
    dress = get_dress_factory().get_dress_by_type(dress_type)
    return Player(dress=dress, player_type=player_type)


@dataclass
class Game:
    """Holds the players of both teams."""

    terrorists: list[Player] = field(default_factory=list)
    counter_terrorists: list[Player] = field(default_factory=list)

    def add_terrorist(self, dress_type: str) -> None:
        self.terrorists.append(new_player("T", dress_type))

    def add_counter_terrorist(self, dress_type: str) -> None:
        self.counter_terrorists.append(new_player("CT", dress_type))


def main(argv: list[str] | None = None) -> None:
    game = Game()
    for _ in range(4):
        game.add_terrorist(TERRORIST_DRESS_TYPE)
    for _ in range(3):
        game.add_counter_terrorist(COUNTER_TERRORIST_DRESS_TYPE)

    for dress_type, dress in get_dress_factory().dress_map.items():
        print(f"DressColorType: {dress_type}\nDressColor: {dress.color}")


if __name__ == "__main__":
    main()