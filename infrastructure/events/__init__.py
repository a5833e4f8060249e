from .event_bus_interface import DisabledEventBus, EventBus
from .redis_event_bus import RedisEventBus, get_event_bus, reset_event_bus


__all__ = ["DisabledEventBus", "EventBus", "RedisEventBus", "get_event_bus", "reset_event_bus"]
