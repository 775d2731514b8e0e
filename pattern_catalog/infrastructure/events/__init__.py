from .publisher import ConfigurableEventPublisher, create_event_publisher

__all__ = ["ConfigurableEventPublisher", "create_event_publisher"]
