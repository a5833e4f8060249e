"""
PaymentConfirmationService - Payment proof intake

Attaches one transfer proof per seller to an unpaid purchase, decrements the
stock it reserved and marks it paid, all in one transaction.

Proofs arrive either as a plain list (``fileIds``), paired positionally with
the purchase's sellers in ascending seller id order, or as explicit
``payments: [{"sellerId", "fileId"}]`` pairs.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from marketplace.catalog.domain.services import FileService
from marketplace.domain.events import PurchasePaidEvent
from marketplace.infra.observability.metrics import payment_confirmation_failures, payments_confirmed_total
from marketplace.ordering.api.serializers import ConfirmPaymentRequestSerializer, first_error_message
from marketplace.ordering.domain.models import Purchase, SellerPaymentDetail
from marketplace.ordering.domain.validation import parse_identity
from marketplace.services.base import BaseService, ErrorCodes, ServiceError, ServiceResult, service_err, service_ok
from utils.transaction_utils import TransactionError, atomic_with_lock_timeout, retry_on_deadlock

from .aggregation import group_items_by_seller, requested_quantities
from .inventory_service import InventoryService
from .results import PaymentConfirmationView, ProofAssignmentView


@dataclass(frozen=True)
class ProofSubmission:
    """Parsed confirmation body. Exactly one of the two forms is set."""

    file_ids: Optional[Tuple[Any, ...]] = None
    payments: Optional[Tuple[Tuple[int, Any], ...]] = None

    @property
    def count(self) -> int:
        return len(self.file_ids if self.file_ids is not None else self.payments)


class PaymentConfirmationService(BaseService):
    """
    Service for confirming purchase payments.

    Workflow (one transaction, rolled back on any failure):
    1. Lock the purchase row; reject unknown or already paid purchases
    2. Pair proofs with the purchase's sellers and check every proof file exists
    3. Lock the purchased products in ascending id order and re-check stock
    4. Insert one SellerPaymentDetail per seller and decrement stock
    5. Mark the purchase paid
    """

    def __init__(
        self,
        inventory_service: InventoryService = None,
        file_service: FileService = None,
        lock_timeout_ms: Optional[int] = None,
        deadlock_retries: Optional[int] = None,
    ):
        super().__init__()
        self.inventory_service = inventory_service or InventoryService()
        self.file_service = file_service or FileService()
        self.lock_timeout_ms = (
            lock_timeout_ms if lock_timeout_ms is not None else getattr(settings, "PURCHASE_LOCK_TIMEOUT_MS", None)
        )
        retries = deadlock_retries if deadlock_retries is not None else getattr(settings, "PURCHASE_DEADLOCK_RETRIES", 3)
        self._confirm_in_transaction = retry_on_deadlock(max_retries=retries)(self._confirm_in_transaction)

    @BaseService.log_performance
    def confirm_payment(self, purchase_id: Any, payload: Mapping) -> ServiceResult[PaymentConfirmationView]:
        """
        Confirm payment of ``purchase_id`` from a ``POST /purchase/<id>`` body.

        Returns:
            ServiceResult with the PaymentConfirmationView, or one of
            validation_error, order_not_found, order_already_paid,
            proof_count_mismatch, proof_seller_mismatch,
            invalid_proof_reference, insufficient_stock, database_error
        """
        parsed = self.parse_submission(payload)
        if not parsed.ok:
            payment_confirmation_failures.labels(reason=parsed.error).inc()
            return parsed

        purchase_pk = parse_identity(purchase_id)
        if purchase_pk is None:
            payment_confirmation_failures.labels(reason=ErrorCodes.ORDER_NOT_FOUND).inc()
            return service_err(ErrorCodes.ORDER_NOT_FOUND, f"Purchase {purchase_id} not found")

        try:
            view = self._confirm_in_transaction(purchase_pk, parsed.value)
        except ServiceError as e:
            self.logger.info(f"Payment confirmation for purchase {purchase_pk} rejected: {e.error_detail}")
            payment_confirmation_failures.labels(reason=e.error).inc()
            return e.to_result()
        except (DatabaseError, TransactionError) as e:
            self.logger.error(f"Database error while confirming purchase {purchase_pk}: {e}", exc_info=True)
            payment_confirmation_failures.labels(reason=ErrorCodes.DATABASE_ERROR).inc()
            return service_err(ErrorCodes.DATABASE_ERROR, "Failed to confirm payment")

        payments_confirmed_total.inc()
        self.logger.info(f"Purchase {view.purchase_id} paid with {len(view.payment_details)} proofs")
        return service_ok(view)

    def parse_submission(self, payload) -> ServiceResult[ProofSubmission]:
        """Check the body shape. File ids are resolved later, inside the transaction."""
        serializer = ConfirmPaymentRequestSerializer(data=payload)
        if not serializer.is_valid():
            detail = first_error_message(serializer.errors) or "Invalid payment confirmation request"
            return service_err(ErrorCodes.VALIDATION_ERROR, detail)

        data = serializer.validated_data
        if "payments" in data:
            return service_ok(
                ProofSubmission(payments=tuple((pair["sellerId"], pair["fileId"]) for pair in data["payments"]))
            )
        return service_ok(ProofSubmission(file_ids=tuple(data["fileIds"])))

    def _confirm_in_transaction(self, purchase_pk: int, submission: ProofSubmission) -> PaymentConfirmationView:
        with atomic_with_lock_timeout(self.lock_timeout_ms):
            purchase = Purchase.objects.select_for_update().filter(pk=purchase_pk).first()
            if purchase is None:
                raise ServiceError(ErrorCodes.ORDER_NOT_FOUND, f"Purchase {purchase_pk} not found")
            if purchase.is_paid:
                raise ServiceError(ErrorCodes.ORDER_ALREADY_PAID, f"Purchase {purchase_pk} is already paid")

            items = list(purchase.items.all())
            groups = group_items_by_seller(items)
            assignments = self._validate_proof_files(self._assign_proofs(list(groups), submission))

            products = self.inventory_service.lock_products_for_update(item.product_id for item in items)
            needed = requested_quantities((item.product_id, item.quantity) for item in items)
            for product_id, quantity in needed.items():
                product = products.get(product_id)
                if product is None:
                    raise ServiceError(ErrorCodes.PRODUCT_NOT_FOUND, f"Product with ID {product_id} not found")
                if product.stock_quantity < quantity:
                    raise ServiceError(
                        ErrorCodes.INSUFFICIENT_STOCK,
                        f"Insufficient stock for product {product_id}: "
                        f"available {product.stock_quantity}, requested {quantity}",
                    )

            for seller_id, file_id in assignments:
                SellerPaymentDetail.objects.create(purchase=purchase, seller_id=seller_id, proof_file_id=file_id)
                for item in groups[seller_id]:
                    self.inventory_service.decrement_quantity(item.product_id, item.quantity)

            purchase.is_paid = True
            purchase.paid_at = timezone.now()
            purchase.save(update_fields=["is_paid", "paid_at", "updated_at"])

            PurchasePaidEvent(purchase.pk, [file_id for _, file_id in assignments]).publish_on_commit()

        return PaymentConfirmationView(
            purchase_id=str(purchase.pk),
            paid_at=purchase.paid_at,
            payment_details=[
                ProofAssignmentView(seller_id=str(seller_id), file_id=str(file_id))
                for seller_id, file_id in assignments
            ],
        )

    def _assign_proofs(self, seller_ids: List[int], submission: ProofSubmission) -> List[Tuple[int, Any]]:
        """Pair each seller (ascending id) with its raw file reference."""
        if submission.count != len(seller_ids):
            raise ServiceError(
                ErrorCodes.PROOF_COUNT_MISMATCH,
                f"Number of file IDs ({submission.count}) must match number of sellers ({len(seller_ids)})",
            )

        if submission.file_ids is not None:
            return list(zip(seller_ids, submission.file_ids))

        by_seller = dict(submission.payments)
        if len(by_seller) != len(submission.payments) or set(by_seller) != set(seller_ids):
            raise ServiceError(
                ErrorCodes.PROOF_SELLER_MISMATCH,
                f"Payment proofs must cover sellers {seller_ids} exactly once",
            )
        return [(seller_id, by_seller[seller_id]) for seller_id in seller_ids]

    def _validate_proof_files(self, assignments: List[Tuple[int, Any]]) -> List[Tuple[int, int]]:
        resolved = []
        for seller_id, raw_file_id in assignments:
            file_id = parse_identity(raw_file_id)
            if file_id is None:
                raise ServiceError(ErrorCodes.INVALID_PROOF_REFERENCE, f"Invalid file ID format: {raw_file_id}")
            resolved.append((seller_id, file_id))

        missing = self.file_service.find_missing(file_id for _, file_id in resolved)
        if missing:
            raise ServiceError(ErrorCodes.INVALID_PROOF_REFERENCE, f"File with ID {missing[0]} not found")
        return resolved
