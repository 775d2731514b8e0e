"""Base event classes and protocols - foundation for catalogue notifications."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=_utcnow)
    event_type: str = ""
    aggregate_id: str
    aggregate_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get('event_type'):
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class CatalogRenderedEvent(DomainEvent):
    """Raised after the markdown catalogue has been rendered."""
    aggregate_type: str = "catalog"
    pattern_count: int
    stub_count: int = 0
    size_bytes: int = 0


class CatalogValidatedEvent(DomainEvent):
    """Raised after a catalogue consistency check."""
    aggregate_type: str = "catalog"
    pattern_count: int
    problem_count: int


class DemoExecutedEvent(DomainEvent):
    """Raised after a pattern sample demo has run."""
    aggregate_type: str = "pattern"
    line_count: int


class DocumentLintedEvent(DomainEvent):
    """Raised after a markdown document has been linted."""
    aggregate_type: str = "document"
    error_count: int
    warning_count: int
    passed: bool


class DraftsConsolidatedEvent(DomainEvent):
    """Raised after concatenated drafts were merged into one document."""
    aggregate_type: str = "document"
    sections_in: int
    sections_out: int
    toc_regenerated: bool = False


class EventPublisher(Protocol):
    """Protocol for event publishing."""

    def publish(self, event: DomainEvent) -> None:
        """Publish a single domain event."""
        ...

    def register_handler(self, event_type: str, handler) -> None:
        """Register an event handler."""
        ...


class EventHandler(Protocol):
    """Protocol for event handlers."""

    def handle(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        ...


def event_summary(event: DomainEvent, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Flatten an event into a log-friendly dictionary."""
    data = event.model_dump(exclude={"metadata", "event_id"})
    data["occurred_at"] = event.occurred_at.isoformat()
    if extra:
        data.update(extra)
    return data
