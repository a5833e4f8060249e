import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from django.db import transaction
from django.utils import timezone

from infrastructure.events import get_event_bus


logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    """Base class for all domain events."""

    event_type: str
    occurred_at: datetime = field(default_factory=timezone.now)
    payload: Dict[str, Any] = field(default_factory=dict)

    def publish_on_commit(self, using: str = "default") -> None:
        """
        Publish once the surrounding transaction commits.

        A rolled back purchase never emits its event. Outside a transaction
        Django runs the callback immediately.
        """

        def publish():
            get_event_bus().publish(self.event_type, self.payload)

        transaction.on_commit(publish, using=using)
        logger.debug(f"Queued {self.event_type} for publication on commit")
