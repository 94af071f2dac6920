"""Strategy: a cache whose eviction algorithm can be swapped at run time."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EvictionAlgo(ABC):
    """A policy for making room in a full cache; counts its evictions."""

    def __init__(self) -> None:
        self.evictions = 0

    @abstractmethod
    def evict(self, cache: Cache) -> None:
        """Make room in ``cache``."""


class Fifo(EvictionAlgo):
    def evict(self, cache: Cache) -> None:
        self.evictions += 1
        print("Evicting by fifo strtegy")


class Lfu(EvictionAlgo):
    def evict(self, cache: Cache) -> None:
        self.evictions += 1
        print("Evicting by lfu strtegy")


class Lru(EvictionAlgo):
    def evict(self, cache: Cache) -> None:
        self.evictions += 1
        print("Evicting by lru strtegy")


class Cache:
    """A small key-value cache that evicts when it reaches its capacity."""

    def __init__(self, eviction_algo: EvictionAlgo, max_capacity: int = 2) -> None:
        self.storage: dict[str, str] = {}
        self.eviction_algo = eviction_algo
        self.capacity = 0
        self.max_capacity = max_capacity

    def add(self, key: str, value: str) -> None:
        if self.capacity == self.max_capacity:
            self.evict()
        self.capacity += 1
        self.storage[key] = value

    def get(self, key: str) -> None:
        """Drop ``key`` from the storage."""
        self.storage.pop(key, None)

    def evict(self) -> None:
        self.eviction_algo.evict(self)
        self.capacity -= 1


def main(argv: list[str] | None = None) -> None:
    cache = Cache(Lfu())
    cache.add("a", "1")
    cache.add("b", "2")
    cache.add("c", "3")

    cache.eviction_algo = Lru()
    cache.add("d", "4")

    cache.eviction_algo = Fifo()
    cache.add("e", "5")


if __name__ == "__main__":
    main()