"""Tests for the configurable event publisher."""
from unittest.mock import Mock

import pytest

from pattern_catalog.domain.base.events import CatalogValidatedEvent, DemoExecutedEvent
from pattern_catalog.infrastructure.events import ConfigurableEventPublisher, create_event_publisher


def validated_event() -> CatalogValidatedEvent:
    return CatalogValidatedEvent(aggregate_id="catalog", pattern_count=23, problem_count=0)


class TestConfigurableEventPublisher:
    """Test event publishing modes."""

    def test_invalid_mode(self):
        """Test that unknown modes are rejected."""
        with pytest.raises(ValueError, match="Invalid mode"):
            ConfigurableEventPublisher(mode="async")

    def test_sync_mode_calls_handlers(self):
        """Test that sync mode calls handlers registered for the event type."""
        publisher = create_event_publisher(mode="sync")
        handler = Mock()
        other = Mock()
        publisher.register_handler("CatalogValidatedEvent", handler)
        publisher.register_handler("DemoExecutedEvent", other)

        event = validated_event()
        publisher.publish(event)

        handler.assert_called_once_with(event)
        other.assert_not_called()

    def test_wildcard_handler(self, sync_publisher, recorded_events):
        """Test that '*' handlers receive every event."""
        sync_publisher.publish(validated_event())
        sync_publisher.publish(DemoExecutedEvent(aggregate_id="observer", line_count=2))
        assert [e.event_type for e in recorded_events.events] == [
            "CatalogValidatedEvent", "DemoExecutedEvent"]

    def test_failing_handler_does_not_stop_others(self):
        """Test that a failing handler is logged and the rest still run."""
        publisher = create_event_publisher(mode="sync")
        failing = Mock(side_effect=RuntimeError("boom"))
        succeeding = Mock()
        publisher.register_handler("CatalogValidatedEvent", failing)
        publisher.register_handler("CatalogValidatedEvent", succeeding)

        publisher.publish(validated_event())

        succeeding.assert_called_once()

    def test_disabled_publisher(self):
        """Test that a disabled publisher delivers nothing."""
        publisher = create_event_publisher(mode="sync", enabled=False)
        handler = Mock()
        publisher.register_handler("*", handler)
        publisher.publish(validated_event())
        handler.assert_not_called()

    def test_logging_mode_does_not_call_handlers(self):
        """Test that logging mode only logs."""
        publisher = create_event_publisher(mode="logging")
        handler = Mock()
        publisher.register_handler("*", handler)
        publisher.publish(validated_event())
        handler.assert_not_called()

    def test_registered_handler_counts(self):
        """Test the debugging summary of handlers."""
        publisher = create_event_publisher(mode="sync")
        publisher.register_handler("A", Mock())
        publisher.register_handler("A", Mock())
        assert publisher.get_registered_handlers() == {"A": 2}
