"""
Marketplace Service Layer

Shared primitives for the marketplace domain services. The purchase lifecycle
services themselves live in ``marketplace.ordering.domain.services``.

Usage:
    from marketplace.services import ErrorCodes, service_err, service_ok

    result = purchase_service.create_purchase(payload)
    if not result.ok and result.error == ErrorCodes.INSUFFICIENT_STOCK:
        ...
"""

from .base import BaseService, ErrorCodes, ServiceError, ServiceResult, service_err, service_ok


__all__ = [
    # Base classes
    "BaseService",
    "ServiceResult",
    "ServiceError",
    # Helper functions
    "service_ok",
    "service_err",
    # Error codes
    "ErrorCodes",
]
