"""Base domain layer - shared kernel for catalogue and document contexts."""

from .entity import Entity, ValueObject
from .events import (
    CatalogRenderedEvent,
    CatalogValidatedEvent,
    DemoExecutedEvent,
    DocumentLintedEvent,
    DomainEvent,
    DraftsConsolidatedEvent,
    EventHandler,
    EventPublisher,
)
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    # Models
    "Entity",
    "ValueObject",
    # Events
    "DomainEvent",
    "CatalogRenderedEvent",
    "CatalogValidatedEvent",
    "DemoExecutedEvent",
    "DocumentLintedEvent",
    "DraftsConsolidatedEvent",
    "EventPublisher",
    "EventHandler",
    # Exceptions
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConfigurationError",
]
