"""Abstract factory: brand factories that produce matching shoes and shirts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_DEFAULT_SIZE = 14


@dataclass
class Shoe:
    """A shoe carrying a brand logo and a size."""

    logo: str
    size: int


@dataclass
class Shirt:
    """A shirt carrying a brand logo and a size."""

    logo: str
    size: int


class AdidasShoe(Shoe):
    """A shoe made by the Adidas factory."""


class AdidasShirt(Shirt):
    """A shirt made by the Adidas factory."""


class NikeShoe(Shoe):
    """A shoe made by the Nike factory."""


class NikeShirt(Shirt):
    """A shirt made by the Nike factory."""


class SportsFactory(ABC):
    """Produces a family of related sports products."""

    @abstractmethod
    def make_shoe(self) -> Shoe:
        """Return a new shoe of this brand."""

    @abstractmethod
    def make_shirt(self) -> Shirt:
        """Return a new shirt of this brand."""


class Adidas(SportsFactory):
    """Factory for Adidas products."""

    def make_shoe(self) -> Shoe:
        return AdidasShoe(logo="adidas", size=_DEFAULT_SIZE)

    def make_shirt(self) -> Shirt:
        return AdidasShirt(logo="adidas", size=_DEFAULT_SIZE)


class Nike(SportsFactory):
    """Factory for Nike products."""

    def make_shoe(self) -> Shoe:
        return NikeShoe(logo="nike", size=_DEFAULT_SIZE)

    def make_shirt(self) -> Shirt:
        return NikeShirt(logo="nike", size=_DEFAULT_SIZE)


_FACTORIES: dict[str, type[SportsFactory]] = {
    "adidas": Adidas,
    "nike": Nike,
}


def get_sports_factory(brand: str) -> SportsFactory:
    """Return the factory for ``brand``; raise ValueError for an unknown brand."""
    try:
        return _FACTORIES[brand]()
    except KeyError:
        raise ValueError("Wrong brand type passed") from None


def describe(item: Shoe | Shirt) -> str:
    """Return the two-line description of a product."""
    return f"Logo: {item.logo}\nSize: {item.size}"


def main(argv: list[str] | None = None) -> None:
    adidas_factory = get_sports_factory("adidas")
    nike_factory = get_sports_factory("nike")

    products = [
        nike_factory.make_shoe(),
        nike_factory.make_shirt(),
        adidas_factory.make_shoe(),
        adidas_factory.make_shirt(),
    ]
    for product in products:
        print(describe(product))


if __name__ == "__main__":
    main()