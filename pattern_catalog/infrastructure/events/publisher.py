"""Configurable Event Publisher - Simple, mode-based event publishing."""
from typing import Callable, Dict, List

from pattern_catalog.domain.base.events import DomainEvent, EventPublisher, event_summary
from pattern_catalog.infrastructure.logging.logger import get_logger


class ConfigurableEventPublisher(EventPublisher):
    """
    Simple, configurable event publisher.

    Modes:
    - "logging": Just log events for an audit trail (CLI runs)
    - "sync": Call registered handlers synchronously (library use, tests)
    """

    VALID_MODES = ("logging", "sync")

    def __init__(self, mode: str = "logging", enabled: bool = True):
        """Initialize with publishing mode."""
        if mode not in self.VALID_MODES:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of: {list(self.VALID_MODES)}")
        self.mode = mode
        self.enabled = enabled
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}
        self._logger = get_logger(__name__)

    def publish(self, event: DomainEvent) -> None:
        """Publish event based on configured mode."""
        if not self.enabled:
            return
        try:
            if self.mode == "logging":
                self._log_event(event)
            else:
                self._call_handlers_sync(event)
        except Exception as e:
            # Publishing never breaks the operation that raised the event
            self._logger.error("Failed to publish event", event_type=event.event_type, error=str(e))

    def register_handler(self, event_type: str, handler: Callable[[DomainEvent], None]) -> None:
        """Register event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Registered handler for {event_type}")

    def _log_event(self, event: DomainEvent) -> None:
        self._logger.info("Event", **event_summary(event))

    def _call_handlers_sync(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(event.event_type, []) + self._handlers.get("*", [])

        if not handlers:
            self._logger.debug(f"No handlers registered for {event.event_type}")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    "Event handler failed", event_type=event.event_type, error=str(e)
                )
                # Continue with other handlers

    def get_registered_handlers(self) -> Dict[str, int]:
        """Get count of registered handlers by event type (for debugging)."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}


def create_event_publisher(mode: str = "logging", enabled: bool = True) -> ConfigurableEventPublisher:
    """Create event publisher with specified mode."""
    return ConfigurableEventPublisher(mode=mode, enabled=enabled)
