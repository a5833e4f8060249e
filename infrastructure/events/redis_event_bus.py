import json
import logging
import threading
from typing import Callable

import redis
from django.conf import settings

from .event_bus_interface import DisabledEventBus, EventBus


logger = logging.getLogger(__name__)


class RedisEventBus(EventBus):
    """Redis pub/sub implementation of event bus."""

    def __init__(self, redis_url: str = None):
        self.redis_url = redis_url or getattr(settings, "REDIS_URL", "redis://localhost:6379/0")

        try:
            self.redis_client = redis.from_url(self.redis_url)
        except Exception as e:
            logger.error(f"Failed to configure Redis client for {self.redis_url}: {e}")
            self.redis_client = None

        self._subscribers = {}
        self._listening = False

    def publish(self, event_type: str, payload: dict):
        """Publish event to Redis channel."""
        if not self.redis_client:
            logger.warning(f"Redis client not available. Event {event_type} dropped.")
            return

        try:
            from django.utils import timezone

            message = {"event_type": event_type, "occurred_at": timezone.now().isoformat(), "payload": payload}
            channel = f"events.{event_type}"
            self.redis_client.publish(channel, json.dumps(message))
            logger.info(f"Published event: {event_type}")
        except redis.RedisError as e:
            # Events are published after commit; a broker outage must not fail the request
            logger.error(f"Failed to publish event {event_type}: {str(e)}")

    def subscribe(self, event_type: str, handler: Callable):
        """Subscribe to event channel."""
        self._subscribers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered handler for event: {event_type}")

    def start_listening(self):
        """Start listening to subscribed channels (background thread)."""
        if self._listening or not self.redis_client:
            return

        def listen():
            try:
                pubsub = self.redis_client.pubsub()
                channels = [f"events.{et}" for et in self._subscribers.keys()]

                if not channels:
                    return

                pubsub.subscribe(*channels)
                self._listening = True
                logger.info(f"EventBus listening on: {channels}")

                for message in pubsub.listen():
                    if message["type"] == "message":
                        self._handle_message(message)
            except redis.RedisError as e:
                logger.error(f"EventBus listener stopped: {e}")
                self._listening = False

        thread = threading.Thread(target=listen, daemon=True)
        thread.start()

    def _handle_message(self, message):
        """Dispatch the full event envelope (event_type, occurred_at, payload) to handlers."""
        try:
            data = json.loads(message["data"])
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to decode event message: {str(e)}")
            return

        for handler in self._subscribers.get(data.get("event_type"), []):
            try:
                handler(data)
            except Exception as e:
                logger.error(f"Handler error for {data.get('event_type')}: {str(e)}", exc_info=True)


# Singleton instance
_event_bus_instance = None


def get_event_bus() -> EventBus:
    """Get singleton event bus instance for the configured backend."""
    global _event_bus_instance
    if _event_bus_instance is None:
        backend = getattr(settings, "INFRASTRUCTURE", {}).get("EVENT_BUS_BACKEND", "redis")
        if backend == "redis":
            _event_bus_instance = RedisEventBus()
        else:
            _event_bus_instance = DisabledEventBus()
        logger.debug(f"Created event bus: {type(_event_bus_instance).__name__}")
    return _event_bus_instance


def reset_event_bus():
    """Drop the cached event bus so the next call re-reads settings."""
    global _event_bus_instance
    _event_bus_instance = None
