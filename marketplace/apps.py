import logging

from django.apps import AppConfig
from django.conf import settings


logger = logging.getLogger(__name__)


class MarketplaceConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketplace"

    def ready(self):
        # Register event listeners
        try:
            from marketplace.infra.events.listeners import register_marketplace_listeners

            event_bus = register_marketplace_listeners()
            if getattr(settings, "INFRASTRUCTURE", {}).get("EVENT_BUS_BACKEND") == "redis":
                event_bus.start_listening()
        except Exception as e:
            logger.error(f"Failed to register marketplace listeners: {e}")
