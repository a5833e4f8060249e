from .cart_validator import CartLine, CartSubmission, CartValidator
from .inventory_service import InventoryService
from .payment_confirmation_service import PaymentConfirmationService, ProofSubmission
from .purchase_service import PurchaseService
from .results import (
    PaymentConfirmationView,
    PaymentDetailView,
    ProofAssignmentView,
    PurchasedItemView,
    PurchaseView,
)

__all__ = [
    "CartLine",
    "CartSubmission",
    "CartValidator",
    "InventoryService",
    "PaymentConfirmationService",
    "PaymentConfirmationView",
    "PaymentDetailView",
    "ProofAssignmentView",
    "ProofSubmission",
    "PurchaseService",
    "PurchaseView",
    "PurchasedItemView",
]
