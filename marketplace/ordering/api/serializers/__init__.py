from .purchase_serializers import (
    ConfirmPaymentRequestSerializer,
    ConfirmPaymentResponseSerializer,
    CreatePurchaseRequestSerializer,
    ErrorResponseSerializer,
    PurchaseResponseSerializer,
    first_error_message,
)

__all__ = [
    "ConfirmPaymentRequestSerializer",
    "ConfirmPaymentResponseSerializer",
    "CreatePurchaseRequestSerializer",
    "ErrorResponseSerializer",
    "PurchaseResponseSerializer",
    "first_error_message",
]
