"""Values returned by the purchase services, rendered by the API serializers."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class PurchasedItemView:
    product_id: str
    name: str
    category: str
    qty: int
    price: Decimal
    sku: str
    file_id: str
    file_uri: str
    file_thumbnail_uri: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PaymentDetailView:
    seller_id: str
    bank_account_name: str
    bank_account_holder: str
    bank_account_number: str
    total_price: int


@dataclass(frozen=True)
class PurchaseView:
    purchase_id: str
    purchased_items: List[PurchasedItemView]
    total_price: int
    payment_details: List[PaymentDetailView]


@dataclass(frozen=True)
class ProofAssignmentView:
    seller_id: str
    file_id: str


@dataclass(frozen=True)
class PaymentConfirmationView:
    purchase_id: str
    paid_at: Optional[datetime]
    payment_details: List[ProofAssignmentView] = field(default_factory=list)
    message: str = "Payment confirmed successfully"
