"""
CartValidator - Purchase request validation

Pure checks on the submitted cart and sender contact details. Runs before any
transaction is opened, so a rejected request never touches stock or leaves
partial rows behind.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from marketplace.ordering.api.serializers import CreatePurchaseRequestSerializer, first_error_message
from marketplace.services.base import ErrorCodes, ServiceResult, service_err, service_ok


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class CartSubmission:
    lines: Tuple[CartLine, ...]
    sender_name: str
    sender_contact_type: str
    sender_contact_detail: str

    @property
    def product_ids(self) -> List[int]:
        return [line.product_id for line in self.lines]


class CartValidator:
    """
    Validates a ``POST /purchase`` body with CreatePurchaseRequestSerializer.

    Expected shape::

        {
            "purchasedItems": [{"productId": "7", "qty": 2}],
            "senderName": "Budi Santoso",
            "senderContactType": "email",
            "senderContactDetail": "budi@example.com"
        }
    """

    def validate(self, payload) -> ServiceResult[CartSubmission]:
        serializer = CreatePurchaseRequestSerializer(data=payload)
        if not serializer.is_valid():
            detail = first_error_message(serializer.errors) or "Invalid purchase request"
            logger.info(f"Cart rejected: {detail}")
            return service_err(ErrorCodes.VALIDATION_ERROR, detail)

        data = serializer.validated_data
        return service_ok(
            CartSubmission(
                lines=tuple(
                    CartLine(product_id=item["productId"], quantity=item["qty"]) for item in data["purchasedItems"]
                ),
                sender_name=data["senderName"],
                sender_contact_type=data["senderContactType"],
                sender_contact_detail=data["senderContactDetail"],
            )
        )
