from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Product, Purchase, PurchaseItem
from marketplace.tests.factories import (
    CategoryFactory,
    ProductFactory,
    SellerFactory,
    SellerProfileFactory,
    purchase_payload,
)


class PurchaseCreateIntegrationTest(TestCase):
    def setUp(self):
        container.reset()
        self.client = APIClient()
        self.url = reverse("marketplace:purchase-create")

        self.profile = SellerProfileFactory(
            bank_account_name="BCA", bank_account_holder="Toko Sari", bank_account_number="1234567890"
        )
        self.seller = self.profile.user
        self.category = CategoryFactory(name="Food")
        self.product = ProductFactory(
            seller=self.seller, category=self.category, price=Decimal("15000.00"), stock_quantity=10
        )

    def post(self, payload):
        return self.client.post(self.url, payload, format="json")

    def test_create_purchase_single_seller(self):
        response = self.post(purchase_payload([(self.product, 2)]))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["totalPrice"], 30000)

        item = response.data["purchasedItems"][0]
        self.assertEqual(item["productId"], str(self.product.pk))
        self.assertEqual(item["qty"], 2)
        self.assertEqual(item["category"], "Food")
        # Unit price is rendered as a two-place decimal string
        self.assertEqual(item["price"], "15000.00")
        self.assertEqual(item["fileId"], str(self.product.file_id))
        self.assertEqual(item["fileUri"], self.product.file.file_uri)

        self.assertEqual(
            [dict(detail) for detail in response.data["paymentDetails"]],
            [
                {
                    "sellerId": str(self.seller.pk),
                    "bankAccountName": "BCA",
                    "bankAccountHolder": "Toko Sari",
                    "bankAccountNumber": "1234567890",
                    "totalPrice": 30000,
                }
            ],
        )

        purchase = Purchase.objects.get(pk=int(response.data["purchaseId"]))
        self.assertFalse(purchase.is_paid)
        self.assertEqual(purchase.total_amount, 30000)
        self.assertEqual(purchase.items.count(), 1)

        # Stock is only decremented on payment confirmation
        self.product.refresh_from_db()
        self.assertEqual(self.product.stock_quantity, 10)

    def test_multi_seller_subtotals_sum_to_total(self):
        other_profile = SellerProfileFactory()
        other_product = ProductFactory(seller=other_profile.user, price=Decimal("2500.50"), stock_quantity=5)
        payload = purchase_payload([(other_product, 3), (self.product, 1)])

        response = self.post(payload)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        details = response.data["paymentDetails"]
        self.assertEqual([d["sellerId"] for d in details], sorted([d["sellerId"] for d in details], key=int))
        self.assertEqual(sum(d["totalPrice"] for d in details), response.data["totalPrice"])
        # 2500.50 x 3 = 7501.50 -> 7502, plus 15000
        self.assertEqual(response.data["totalPrice"], 22502)
        self.assertEqual(
            [item["productId"] for item in response.data["purchasedItems"]],
            [str(other_product.pk), str(self.product.pk)],
        )

    def test_seller_without_profile_gets_empty_bank_details(self):
        bare_seller = SellerFactory()
        product = ProductFactory(seller=bare_seller, category=None, file=None)

        response = self.post(purchase_payload([(product, 1)]))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        detail = response.data["paymentDetails"][0]
        self.assertEqual(detail["bankAccountName"], "")
        self.assertEqual(detail["bankAccountNumber"], "")
        item = response.data["purchasedItems"][0]
        self.assertEqual(item["category"], "")
        self.assertEqual(item["fileId"], "")
        self.assertEqual(item["fileUri"], "")

    def test_total_is_snapshot_unaffected_by_later_price_change(self):
        response = self.post(purchase_payload([(self.product, 2)]))
        Product.objects.filter(pk=self.product.pk).update(price=Decimal("99999.00"))

        purchase = Purchase.objects.get(pk=int(response.data["purchaseId"]))
        item = purchase.items.get()
        self.assertEqual(purchase.total_amount, 30000)
        self.assertEqual(item.unit_price, Decimal("15000.00"))
        self.assertEqual(item.total, Decimal("30000.00"))

    def test_insufficient_stock_rolls_back(self):
        response = self.post(purchase_payload([(self.product, 11)]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "insufficient_stock")
        self.assertEqual(
            response.data["message"],
            f"Insufficient stock for product {self.product.pk}: available 10, requested 11",
        )
        self.assertEqual(Purchase.objects.count(), 0)
        self.assertEqual(PurchaseItem.objects.count(), 0)

    def test_repeated_product_checked_against_combined_quantity(self):
        response = self.post(purchase_payload([(self.product, 6), (self.product, 5)]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "insufficient_stock")
        self.assertIn("requested 11", response.data["message"])

    def test_missing_product(self):
        payload = purchase_payload([(self.product, 1)])
        payload["purchasedItems"].append({"productId": "999999", "qty": 1})

        response = self.post(payload)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "product_not_found")
        self.assertEqual(response.data["message"], "Product with ID 999999 not found")
        self.assertEqual(Purchase.objects.count(), 0)

    def test_validation_error(self):
        response = self.post(purchase_payload([(self.product, 1)], contact_type="phone", contact_detail="0812"))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data,
            {"error": "validation_error", "message": "senderContactDetail: Invalid phone number format"},
        )

    def test_empty_cart(self):
        response = self.post(purchase_payload([]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")

    def test_superscript_product_id(self):
        payload = purchase_payload([(self.product, 1)])
        payload["purchasedItems"][0]["productId"] = "\u00b2"

        response = self.post(payload)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data,
            {"error": "validation_error", "message": "purchasedItems[0].productId: Not a valid product ID."},
        )
        self.assertEqual(Purchase.objects.count(), 0)
