"""Abstract Factory: build a consistent family of UI widgets per theme."""
from abc import ABC, abstractmethod
from typing import List


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        ...


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str:
        ...


class LightButton(Button):
    def render(self) -> str:
        return "[ light button ]"


class LightCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] light checkbox"


class DarkButton(Button):
    def render(self) -> str:
        return "[ dark button ]"


class DarkCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] dark checkbox"


class WidgetFactory(ABC):
    """Creates one product of each kind, all from the same family."""

    @abstractmethod
    def create_button(self) -> Button:
        ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        ...


class LightThemeFactory(WidgetFactory):
    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkThemeFactory(WidgetFactory):
    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


def render_form(factory: WidgetFactory) -> List[str]:
    return [factory.create_button().render(), factory.create_checkbox().render()]


def demo() -> List[str]:
    return render_form(LightThemeFactory()) + render_form(DarkThemeFactory())
