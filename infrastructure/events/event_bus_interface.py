from abc import ABC, abstractmethod
from collections import deque
from typing import Callable


class EventBus(ABC):
    """Abstract event bus interface."""

    @abstractmethod
    def publish(self, event_type: str, payload: dict):
        """Publish event to bus."""
        pass

    @abstractmethod
    def subscribe(self, event_type: str, handler: Callable):
        """Subscribe to event type with handler function."""
        pass

    def start_listening(self):
        """Start delivering published events to subscribers (no-op by default)."""
        pass


class DisabledEventBus(EventBus):
    """Drops every event. Selected with INFRASTRUCTURE["EVENT_BUS_BACKEND"] = "disabled"."""

    def __init__(self):
        # Last events kept for inspection in tests and shells
        self.published = deque(maxlen=100)

    def publish(self, event_type: str, payload: dict):
        self.published.append((event_type, payload))

    def subscribe(self, event_type: str, handler: Callable):
        pass
