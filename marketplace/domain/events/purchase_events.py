from dataclasses import dataclass
from typing import List

from .base import DomainEvent


@dataclass
class PurchaseCreatedEvent(DomainEvent):
    """Event: Purchase created, awaiting payment proofs."""

    def __init__(self, purchase_id: int, total_amount: int, seller_ids: List[int]):
        super().__init__(
            event_type="purchase.created",
            payload={"purchase_id": str(purchase_id), "total_amount": total_amount, "seller_ids": seller_ids},
        )


@dataclass
class PurchasePaidEvent(DomainEvent):
    """Event: Payment proofs accepted and stock decremented."""

    def __init__(self, purchase_id: int, proof_file_ids: List[int]):
        super().__init__(
            event_type="purchase.paid",
            payload={"purchase_id": str(purchase_id), "proof_file_ids": [str(file_id) for file_id in proof_file_ids]},
        )
