"""Mediator: a station manager coordinates trains sharing one platform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import ClassVar


class Mediator(ABC):
    """Decides which train may use the platform."""

    @abstractmethod
    def can_arrive(self, train: Train) -> bool:
        """Return True if ``train`` may arrive now; otherwise remember it."""

    @abstractmethod
    def notify_about_departure(self) -> None:
        """Free the platform and let a waiting train in."""


class Train:
    """A train that asks its mediator before using the platform."""

    label: ClassVar[str] = "Train"
    permit_message: ClassVar[str] = "Arrival permitted"

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def arrive(self) -> bool:
        """Try to arrive; return whether the train reached the platform."""
        if not self.mediator.can_arrive(self):
            print(f"{self.label}: Arrival blocked, waiting")
            return False
        print(f"{self.label}: Arrived")
        return True

    def depart(self) -> None:
        print(f"{self.label}: Leaving")
        self.mediator.notify_about_departure()

    def permit_arrival(self) -> None:
        print(f"{self.label}: {self.permit_message}")
        self.arrive()


class PassengerTrain(Train):
    label = "PassengerTrain"
    permit_message = "Arrival permitted, arriving"


class FreightTrain(Train):
    label = "FreightTrain"
    permit_message = "Arrival permitted"


class StationManager(Mediator):
    """Grants the single platform to one train at a time, queueing the rest."""

    def __init__(self) -> None:
        self.is_platform_free = True
        self.train_queue: deque[Train] = deque()

    def can_arrive(self, train: Train) -> bool:
        if self.is_platform_free:
            self.is_platform_free = False
            return True
        self.train_queue.append(train)
        return False

    def notify_about_departure(self) -> None:
        self.is_platform_free = True
        if self.train_queue:
            self.train_queue.popleft().permit_arrival()


def main(argv: list[str] | None = None) -> None:
    station_manager = StationManager()
    passenger_train = PassengerTrain(station_manager)
    freight_train = FreightTrain(station_manager)

    passenger_train.arrive()
    freight_train.arrive()
    passenger_train.depart()


if __name__ == "__main__":
    main()