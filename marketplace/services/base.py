"""
Service-layer primitives for the marketplace app.

Re-exports the shared ServiceResult pattern and defines the error codes the
purchase lifecycle reports. Views map these codes to HTTP status codes.
"""

from utils.service_base import BaseService, ServiceError, ServiceResult, service_err, service_ok


# Common error codes for marketplace services
class ErrorCodes:
    """Standard error codes used across marketplace services."""

    # Validation errors (rejected before any transaction is opened)
    VALIDATION_ERROR = "validation_error"

    # Not found
    PRODUCT_NOT_FOUND = "product_not_found"
    ORDER_NOT_FOUND = "order_not_found"
    INVALID_PROOF_REFERENCE = "invalid_proof_reference"

    # Inventory errors
    INSUFFICIENT_STOCK = "insufficient_stock"

    # Conflicts
    ORDER_ALREADY_PAID = "order_already_paid"
    PROOF_COUNT_MISMATCH = "proof_count_mismatch"
    PROOF_SELLER_MISMATCH = "proof_seller_mismatch"

    # Persistence failures
    DATABASE_ERROR = "database_error"

    CLIENT_ERRORS = frozenset(
        {
            VALIDATION_ERROR,
            PRODUCT_NOT_FOUND,
            ORDER_NOT_FOUND,
            INVALID_PROOF_REFERENCE,
            INSUFFICIENT_STOCK,
            ORDER_ALREADY_PAID,
            PROOF_COUNT_MISMATCH,
            PROOF_SELLER_MISMATCH,
        }
    )


__all__ = ["BaseService", "ErrorCodes", "ServiceError", "ServiceResult", "service_err", "service_ok"]
