"""Factory Method: subclasses decide which transport a logistics plan uses."""
from abc import ABC, abstractmethod
from typing import List


class Transport(ABC):
    @abstractmethod
    def deliver(self, cargo: str) -> str:
        ...


class Truck(Transport):
    def deliver(self, cargo: str) -> str:
        return f"Truck delivers {cargo} by road"


class Ship(Transport):
    def deliver(self, cargo: str) -> str:
        return f"Ship delivers {cargo} by sea"


class Logistics(ABC):
    """Creator: business logic that relies on the factory method."""

    @abstractmethod
    def create_transport(self) -> Transport:
        """The factory method."""

    def plan_delivery(self, cargo: str) -> str:
        transport = self.create_transport()
        return transport.deliver(cargo)


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def demo() -> List[str]:
    return [logistics.plan_delivery("containers")
            for logistics in (RoadLogistics(), SeaLogistics())]
