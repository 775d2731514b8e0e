"""Dependency Injection: collaborators are handed in, not created inside."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Type


class Notifier(ABC):
    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        ...


class EmailNotifier(Notifier):
    def send(self, recipient: str, message: str) -> str:
        return f"email to {recipient}: {message}"


class SmsNotifier(Notifier):
    def send(self, recipient: str, message: str) -> str:
        return f"sms to {recipient}: {message}"


class UserRepository:
    def __init__(self):
        self._users: Dict[str, str] = {}

    def add(self, user_id: str, contact: str) -> None:
        self._users[user_id] = contact

    def contact_for(self, user_id: str) -> str:
        return self._users[user_id]


class WelcomeService:
    """Receives its dependencies through the constructor."""

    def __init__(self, repository: UserRepository, notifier: Notifier):
        self._repository = repository
        self._notifier = notifier

    def welcome(self, user_id: str) -> str:
        return self._notifier.send(self._repository.contact_for(user_id), "welcome aboard")


class Container:
    """A tiny container resolving registered providers by type."""

    def __init__(self):
        self._providers: Dict[Type, Callable[["Container"], Any]] = {}
        self._singletons: Dict[Type, Any] = {}

    def register(self, service: Type, provider: Callable[["Container"], Any],
                 singleton: bool = False) -> None:
        if singleton:
            def cached(container: "Container", _provider=provider, _service=service):
                if _service not in container._singletons:
                    container._singletons[_service] = _provider(container)
                return container._singletons[_service]
            self._providers[service] = cached
        else:
            self._providers[service] = provider

    def resolve(self, service: Type) -> Any:
        if service not in self._providers:
            raise LookupError(f"No provider registered for {service.__name__}")
        return self._providers[service](self)


def demo() -> List[str]:
    container = Container()
    container.register(UserRepository, lambda c: UserRepository(), singleton=True)
    container.register(Notifier, lambda c: EmailNotifier())
    container.register(WelcomeService, lambda c: WelcomeService(
        c.resolve(UserRepository), c.resolve(Notifier)))

    container.resolve(UserRepository).add("ada", "ada@example.com")
    lines = [container.resolve(WelcomeService).welcome("ada")]

    # Swapping the notifier needs no change to WelcomeService
    sms_service = WelcomeService(container.resolve(UserRepository), SmsNotifier())
    lines.append(sms_service.welcome("ada"))
    return lines
