"""Observer: a weather station notifies attached displays of new readings."""
from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float) -> None:
        ...


class Subject:
    def __init__(self):
        self._observers: List[Observer] = []

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def notify(self, temperature: float) -> None:
        for observer in list(self._observers):
            observer.update(temperature)


class WeatherStation(Subject):
    def __init__(self):
        super().__init__()
        self.temperature = 0.0

    def set_temperature(self, value: float) -> None:
        self.temperature = value
        self.notify(value)


class CurrentConditionsDisplay(Observer):
    def __init__(self, name: str):
        self.name = name
        self.readings: List[float] = []

    def update(self, temperature: float) -> None:
        self.readings.append(temperature)


def demo() -> List[str]:
    station = WeatherStation()
    lobby = CurrentConditionsDisplay("lobby")
    office = CurrentConditionsDisplay("office")
    station.attach(lobby)
    station.attach(office)
    station.set_temperature(21.5)
    station.detach(office)
    station.set_temperature(23.0)
    return [f"{display.name}: {display.readings}" for display in (lobby, office)]
