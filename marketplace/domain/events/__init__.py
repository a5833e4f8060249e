from .base import DomainEvent
from .purchase_events import PurchaseCreatedEvent, PurchasePaidEvent


__all__ = [
    "DomainEvent",
    "PurchaseCreatedEvent",
    "PurchasePaidEvent",
]
