"""
Race tests for the purchase flow.

They need real row locks, so they are skipped on the default SQLite test
database. Run them against Postgres by pointing the DB_* variables at a
server where the user may create the test database::

    DB_NAME=lapak DB_USER=lapak DB_PASS=lapak DB_HOST=localhost pytest -m postgres
"""

import threading
import unittest

import pytest
from django.db import connection, connections
from django.test import TransactionTestCase

from marketplace.models import Product, Purchase
from marketplace.ordering.domain.services import PaymentConfirmationService, PurchaseService
from marketplace.services.base import ErrorCodes
from marketplace.tests.factories import ProductFactory, SellerProfileFactory, StoredFileFactory, purchase_payload


pytestmark = pytest.mark.postgres


@unittest.skipUnless(connection.features.has_select_for_update, "Row locks need a database with SELECT FOR UPDATE")
class ConcurrentConfirmationTest(TransactionTestCase):
    """Two buyers racing for the last unit: the row lock lets exactly one confirmation through."""

    def setUp(self):
        seller = SellerProfileFactory().user
        self.product = ProductFactory(seller=seller, stock_quantity=1)
        purchase_service = PurchaseService()
        self.purchase_ids = [
            purchase_service.create_purchase(purchase_payload([(self.product, 1)])).value.purchase_id
            for _ in range(2)
        ]
        self.proofs = [StoredFileFactory(), StoredFileFactory()]

    def test_only_one_confirmation_wins(self):
        results = []
        barrier = threading.Barrier(2)

        def confirm(purchase_id, proof):
            try:
                barrier.wait()
                result = PaymentConfirmationService().confirm_payment(purchase_id, {"fileIds": [str(proof.pk)]})
                results.append(result)
            finally:
                connections.close_all()

        threads = [
            threading.Thread(target=confirm, args=(purchase_id, proof))
            for purchase_id, proof in zip(self.purchase_ids, self.proofs)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        self.assertEqual(len(results), 2)
        self.assertEqual(sorted(result.ok for result in results), [False, True])
        failed = next(result for result in results if not result.ok)
        self.assertEqual(failed.error, ErrorCodes.INSUFFICIENT_STOCK)

        self.assertEqual(Product.objects.get(pk=self.product.pk).stock_quantity, 0)
        self.assertEqual(Purchase.objects.filter(is_paid=True).count(), 1)

    def test_concurrent_creations_both_succeed(self):
        results = []
        barrier = threading.Barrier(2)

        def create():
            try:
                barrier.wait()
                results.append(PurchaseService().create_purchase(purchase_payload([(self.product, 1)])))
            finally:
                connections.close_all()

        threads = [threading.Thread(target=create) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        self.assertEqual(len(results), 2)
        self.assertTrue(all(result.ok for result in results))
        self.assertEqual(Product.objects.get(pk=self.product.pk).stock_quantity, 1)
