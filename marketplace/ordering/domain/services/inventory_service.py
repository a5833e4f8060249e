"""
InventoryService - Stock Ledger Access

The only component that touches product stock counters. Every read that a
stock decision depends on goes through SELECT FOR UPDATE, so two purchases
touching the same product serialize on the row lock: the second one blocks
until the first commits or rolls back and then sees the updated quantity.
"""

import logging
from typing import Dict, Iterable, Optional

from django.db.models import F
from django.utils import timezone

from marketplace.catalog.domain.models import Product
from marketplace.infra.observability.metrics import stock_lock_wait_seconds
from marketplace.services.base import BaseService


logger = logging.getLogger(__name__)


class InventoryService(BaseService):
    """
    Row-locked product reads and stock decrements.

    All methods must run inside the caller's ``transaction.atomic()`` block;
    locks are released when that transaction ends.
    """

    def lock_product_for_update(self, product_id: int) -> Optional[Product]:
        """
        Read a product row with an exclusive lock held until the transaction ends.

        Returns:
            The locked Product, or None if no such product exists
        """
        with stock_lock_wait_seconds.time():
            product = Product.objects.select_for_update().filter(pk=product_id).first()

        if product is not None:
            self.logger.debug(f"Locked product {product_id} (stock={product.stock_quantity})")
        return product

    def lock_products_for_update(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        """
        Lock every distinct product in ascending id order.

        A fixed acquisition order means two carts listing the same products in
        opposite order cannot deadlock each other. Missing ids are simply
        absent from the result.
        """
        locked = {}
        for product_id in sorted(set(product_ids)):
            product = self.lock_product_for_update(product_id)
            if product is not None:
                locked[product_id] = product
        return locked

    def decrement_quantity(self, product_id: int, amount: int) -> int:
        """
        Subtract ``amount`` from the stored stock.

        No sufficiency check at this layer: callers decide against a locked
        read first. Returns the number of rows updated (0 or 1).
        """
        updated = Product.objects.filter(pk=product_id).update(
            stock_quantity=F("stock_quantity") - amount,
            updated_at=timezone.now(),
        )
        self.logger.info(f"Stock decremented: product={product_id}, quantity={amount}")
        return updated
