"""Bridge: remote controls (abstraction) vary independently of devices."""
from abc import ABC, abstractmethod
from typing import List


class Device(ABC):
    """Implementation side of the bridge."""

    def __init__(self):
        self.volume = 10
        self.enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    def set_volume(self, volume: int) -> None:
        self.volume = max(0, min(100, volume))


class Tv(Device):
    name = "TV"


class Radio(Device):
    name = "Radio"


class RemoteControl:
    """Abstraction side; holds a reference to a device."""

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> str:
        self.device.enabled = not self.device.enabled
        return f"{self.device.name} {'on' if self.device.enabled else 'off'}"

    def volume_up(self) -> str:
        self.device.set_volume(self.device.volume + 10)
        return f"{self.device.name} volume {self.device.volume}"


class AdvancedRemoteControl(RemoteControl):
    def mute(self) -> str:
        self.device.set_volume(0)
        return f"{self.device.name} muted"


def demo() -> List[str]:
    return [
        RemoteControl(Tv()).toggle_power(),
        RemoteControl(Radio()).volume_up(),
        AdvancedRemoteControl(Radio()).mute(),
    ]
