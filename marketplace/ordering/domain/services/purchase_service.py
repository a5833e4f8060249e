"""
PurchaseService - Order creation

Turns a validated multi-seller cart into a Purchase with its line items in a
single transaction, and reports how much the buyer owes each seller.

Stock is locked and checked here but only decremented when the buyer
confirms payment (see PaymentConfirmationService).
"""

from typing import Dict, List, Mapping, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError

from accounts.domain.services import BankDetailsService
from marketplace.catalog.domain.models import Product
from marketplace.catalog.domain.services import CategoryNameResolver, FileService
from marketplace.domain.events import PurchaseCreatedEvent
from marketplace.infra.observability.metrics import (
    purchase_creation_failures,
    purchase_sellers,
    purchase_value,
    purchases_created_total,
)
from marketplace.ordering.domain.models import Purchase, PurchaseItem
from marketplace.services.base import BaseService, ErrorCodes, ServiceError, ServiceResult, service_err, service_ok
from utils.logging_utils import mask_value
from utils.transaction_utils import TransactionError, atomic_with_lock_timeout, retry_on_deadlock

from .aggregation import line_total, requested_quantities, rounded_line_total, seller_subtotals
from .cart_validator import CartLine, CartSubmission, CartValidator
from .inventory_service import InventoryService
from .results import PaymentDetailView, PurchasedItemView, PurchaseView


class PurchaseService(BaseService):
    """
    Service for creating purchases.

    Dependencies:
    - CartValidator: request validation, before any transaction
    - InventoryService: row-locked product reads
    - BankDetailsService: seller payout destinations for the response
    - FileService: product media URIs for the response

    Workflow (one transaction, rolled back on any failure):
    1. Lock every referenced product in ascending id order
    2. Reject missing products and insufficient stock
    3. Snapshot prices and compute line totals, seller subtotals, grand total
    4. Insert the Purchase and its PurchaseItems
    5. Resolve categories, media and bank destinations for the response
    """

    def __init__(
        self,
        cart_validator: CartValidator = None,
        inventory_service: InventoryService = None,
        bank_details_service: BankDetailsService = None,
        file_service: FileService = None,
        lock_timeout_ms: Optional[int] = None,
        deadlock_retries: Optional[int] = None,
    ):
        super().__init__()
        self.cart_validator = cart_validator or CartValidator()
        self.inventory_service = inventory_service or InventoryService()
        self.bank_details_service = bank_details_service or BankDetailsService()
        self.file_service = file_service or FileService()
        self.lock_timeout_ms = (
            lock_timeout_ms if lock_timeout_ms is not None else getattr(settings, "PURCHASE_LOCK_TIMEOUT_MS", None)
        )
        retries = deadlock_retries if deadlock_retries is not None else getattr(settings, "PURCHASE_DEADLOCK_RETRIES", 3)
        self._create_in_transaction = retry_on_deadlock(max_retries=retries)(self._create_in_transaction)

    @BaseService.log_performance
    def create_purchase(self, payload: Mapping) -> ServiceResult[PurchaseView]:
        """
        Create a purchase from a ``POST /purchase`` body.

        Returns:
            ServiceResult with the PurchaseView, or one of validation_error,
            product_not_found, insufficient_stock, database_error

        Example:
            >>> result = purchase_service.create_purchase({
            ...     "purchasedItems": [{"productId": "7", "qty": 2}],
            ...     "senderName": "Budi Santoso",
            ...     "senderContactType": "phone",
            ...     "senderContactDetail": "+628123456789",
            ... })
            >>> result.value.total_price
            30000
        """
        validation = self.cart_validator.validate(payload)
        if not validation.ok:
            purchase_creation_failures.labels(reason=validation.error).inc()
            return validation

        cart = validation.value
        try:
            view = self._create_in_transaction(cart)
        except ServiceError as e:
            self.logger.info(f"Purchase rejected and rolled back: {e.error_detail}")
            purchase_creation_failures.labels(reason=e.error).inc()
            return e.to_result()
        except (DatabaseError, TransactionError) as e:
            self.logger.error(f"Database error while creating purchase: {e}", exc_info=True)
            purchase_creation_failures.labels(reason=ErrorCodes.DATABASE_ERROR).inc()
            return service_err(ErrorCodes.DATABASE_ERROR, "Failed to create purchase record")

        purchases_created_total.inc()
        purchase_value.observe(view.total_price)
        purchase_sellers.observe(len(view.payment_details))
        self.logger.info(
            f"Created purchase {view.purchase_id} for {mask_value(cart.sender_contact_detail)}: "
            f"{len(cart.lines)} items, {len(view.payment_details)} sellers, total {view.total_price}"
        )
        return service_ok(view)

    def _create_in_transaction(self, cart: CartSubmission) -> PurchaseView:
        with atomic_with_lock_timeout(self.lock_timeout_ms):
            products = self.inventory_service.lock_products_for_update(cart.product_ids)
            self._check_stock(cart, products)

            lines = []
            for line in cart.lines:
                product = products[line.product_id]
                lines.append(
                    (
                        line,
                        product,
                        line_total(product.price, line.quantity),
                        rounded_line_total(product.price, line.quantity),
                    )
                )

            grand_total = sum(rounded for _, _, _, rounded in lines)
            subtotals = seller_subtotals((product.seller_id, rounded) for _, product, _, rounded in lines)

            purchase = Purchase.objects.create(
                sender_name=cart.sender_name,
                sender_contact_type=cart.sender_contact_type,
                sender_contact_detail=cart.sender_contact_detail,
                total_amount=grand_total,
                is_paid=False,
            )

            # Financial snapshot: later catalog edits must not change this order
            PurchaseItem.objects.bulk_create(
                [
                    PurchaseItem(
                        purchase=purchase,
                        product=product,
                        seller_id=product.seller_id,
                        quantity=line.quantity,
                        unit_price=product.price,
                        total=exact,
                        product_name=product.name,
                        product_sku=product.sku,
                    )
                    for line, product, exact, _ in lines
                ]
            )

            view = PurchaseView(
                purchase_id=str(purchase.pk),
                purchased_items=self._item_views([(line, product) for line, product, _, _ in lines]),
                total_price=grand_total,
                payment_details=self._payment_detail_views(subtotals),
            )

            PurchaseCreatedEvent(purchase.pk, grand_total, list(subtotals)).publish_on_commit()

        return view

    def _check_stock(self, cart: CartSubmission, products: Dict[int, Product]) -> None:
        for line in cart.lines:
            if line.product_id not in products:
                raise ServiceError(ErrorCodes.PRODUCT_NOT_FOUND, f"Product with ID {line.product_id} not found")

        requested = requested_quantities((line.product_id, line.quantity) for line in cart.lines)
        for product_id, quantity in requested.items():
            available = products[product_id].stock_quantity
            if available < quantity:
                raise ServiceError(
                    ErrorCodes.INSUFFICIENT_STOCK,
                    f"Insufficient stock for product {product_id}: available {available}, requested {quantity}",
                )

    def _item_views(self, lines: List[Tuple[CartLine, Product]]) -> List[PurchasedItemView]:
        categories = CategoryNameResolver()
        categories.preload(product.category_id for _, product in lines)
        files = self.file_service.get_files_info(product.file_id for _, product in lines)

        views = []
        for line, product in lines:
            file_info = files.get(product.file_id)
            views.append(
                PurchasedItemView(
                    product_id=str(product.pk),
                    name=product.name,
                    category=categories.name_for(product.category_id),
                    qty=line.quantity,
                    price=product.price,
                    sku=product.sku,
                    file_id=str(product.file_id) if product.file_id else "",
                    file_uri=file_info.file_uri if file_info else "",
                    file_thumbnail_uri=file_info.file_thumbnail_uri if file_info else "",
                    created_at=product.created_at,
                    updated_at=product.updated_at,
                )
            )
        return views

    def _payment_detail_views(self, subtotals: Dict[int, int]) -> List[PaymentDetailView]:
        destinations = self.bank_details_service.get_bank_destinations(subtotals.keys())
        return [
            PaymentDetailView(
                seller_id=str(seller_id),
                bank_account_name=destinations[seller_id].bank_account_name,
                bank_account_holder=destinations[seller_id].bank_account_holder,
                bank_account_number=destinations[seller_id].bank_account_number,
                total_price=subtotal,
            )
            for seller_id, subtotal in subtotals.items()
        ]
