"""
Dependency Injection Container
================================

Simple service locator for the purchase lifecycle. Services are built lazily
on first use and cached, so every request shares one instance of each.

Usage:
    from infrastructure.container import container

    result = container.purchase_service().create_purchase(request.data)
"""

import logging
from typing import Optional

from .events import EventBus, get_event_bus

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for domain services and infrastructure dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton pattern.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._clear()
            self._initialized = True
            logger.info("Service container initialized")

    def _clear(self):
        self._inventory_service = None
        self._cart_validator = None
        self._bank_details_service = None
        self._file_service = None
        self._purchase_service = None
        self._payment_confirmation_service = None

    def event_bus(self) -> EventBus:
        """Get the configured event bus (Redis pub/sub or disabled)."""
        return get_event_bus()

    def inventory_service(self):
        """Get InventoryService instance."""
        if self._inventory_service is None:
            from marketplace.ordering.domain.services import InventoryService

            self._inventory_service = InventoryService()
            logger.debug("Created InventoryService")
        return self._inventory_service

    def cart_validator(self):
        """Get CartValidator instance."""
        if self._cart_validator is None:
            from marketplace.ordering.domain.services import CartValidator

            self._cart_validator = CartValidator()
            logger.debug("Created CartValidator")
        return self._cart_validator

    def bank_details_service(self):
        """Get BankDetailsService instance."""
        if self._bank_details_service is None:
            from accounts.domain.services import BankDetailsService

            self._bank_details_service = BankDetailsService()
            logger.debug("Created BankDetailsService")
        return self._bank_details_service

    def file_service(self):
        """Get FileService instance."""
        if self._file_service is None:
            from marketplace.catalog.domain.services import FileService

            self._file_service = FileService()
            logger.debug("Created FileService")
        return self._file_service

    def purchase_service(self):
        """Get PurchaseService instance."""
        if self._purchase_service is None:
            from marketplace.ordering.domain.services import PurchaseService

            self._purchase_service = PurchaseService(
                cart_validator=self.cart_validator(),
                inventory_service=self.inventory_service(),
                bank_details_service=self.bank_details_service(),
                file_service=self.file_service(),
            )
            logger.debug("Created PurchaseService")
        return self._purchase_service

    def payment_confirmation_service(self):
        """Get PaymentConfirmationService instance."""
        if self._payment_confirmation_service is None:
            from marketplace.ordering.domain.services import PaymentConfirmationService

            self._payment_confirmation_service = PaymentConfirmationService(
                inventory_service=self.inventory_service(),
                file_service=self.file_service(),
            )
            logger.debug("Created PaymentConfirmationService")
        return self._payment_confirmation_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or after changing settings.
        """
        self._clear()
        logger.info("Service container reset")


# Global singleton instance
container = ServiceContainer()
