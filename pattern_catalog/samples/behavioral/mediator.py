"""Mediator: a dialog coordinates a checkbox and a text field."""
from abc import ABC, abstractmethod
from typing import List, Optional


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: "Component", event: str) -> None:
        ...


class Component:
    def __init__(self, mediator: Optional[Mediator] = None):
        self.mediator = mediator


class Checkbox(Component):
    def __init__(self, mediator: Optional[Mediator] = None):
        super().__init__(mediator)
        self.checked = False

    def toggle(self) -> None:
        self.checked = not self.checked
        self.mediator.notify(self, "toggled")


class TextField(Component):
    def __init__(self, mediator: Optional[Mediator] = None):
        super().__init__(mediator)
        self.enabled = False
        self.text = ""

    def enter(self, text: str) -> None:
        self.text = text
        self.mediator.notify(self, "typed")


class RegistrationDialog(Mediator):
    """Colleagues only talk to the dialog, never to each other."""

    def __init__(self):
        self.subscribe = Checkbox(self)
        self.email = TextField(self)
        self.log: List[str] = []

    def notify(self, sender: Component, event: str) -> None:
        if sender is self.subscribe and event == "toggled":
            self.email.enabled = self.subscribe.checked
            self.log.append(f"email field {'enabled' if self.email.enabled else 'disabled'}")
        elif sender is self.email and event == "typed":
            self.log.append(f"email set to {self.email.text}")


def demo() -> List[str]:
    dialog = RegistrationDialog()
    dialog.subscribe.toggle()
    dialog.email.enter("ada@example.com")
    dialog.subscribe.toggle()
    return dialog.log
