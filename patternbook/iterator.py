"""Iterator: walking a user collection without exposing its storage."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class User:
    name: str
    age: int


@dataclass
class UserIterator:
    """Steps through a list of users in order."""

    users: list[User]
    index: int = 0

    def has_next(self) -> bool:
        return self.index < len(self.users)

    def __iter__(self) -> UserIterator:
        return self

    def __next__(self) -> User:
        if not self.has_next():
            raise StopIteration
        user = self.users[self.index]
        self.index += 1
        return user


@dataclass
class UserCollection:
    """A collection of users that hands out fresh iterators."""

    users: list[User] = field(default_factory=list)

    def create_iterator(self) -> UserIterator:
        return UserIterator(self.users)

    def __iter__(self) -> Iterator[User]:
        return self.create_iterator()


def main(argv: list[str] | None = None) -> None:
    collection = UserCollection([User(name="a", age=30), User(name="b", age=20)])
    for user in collection:
        print(f"User is {user}")


if __name__ == "__main__":
    main()