from django.conf import settings
from django.db import models

from marketplace.catalog.domain.models import Product, StoredFile


class Purchase(models.Model):
    CONTACT_TYPE_EMAIL = "email"
    CONTACT_TYPE_PHONE = "phone"
    CONTACT_TYPE_CHOICES = [
        (CONTACT_TYPE_EMAIL, "Email"),
        (CONTACT_TYPE_PHONE, "Phone"),
    ]

    # Sender Information
    sender_name = models.CharField(max_length=55)
    sender_contact_type = models.CharField(max_length=10, choices=CONTACT_TYPE_CHOICES)
    sender_contact_detail = models.CharField(max_length=255)

    # Pricing: sum of line totals rounded to whole currency units
    total_amount = models.BigIntegerField()

    # Payment (flips exactly once, on confirmation)
    is_paid = models.BooleanField(default=False)
    paid_at = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["is_paid", "-created_at"], name="marketplace_is_paid_0c8b52_idx"),
        ]

    def __str__(self):
        return f"Purchase {self.pk} by {self.sender_name}"

    @property
    def status(self) -> str:
        return "paid" if self.is_paid else "created"


class PurchaseItem(models.Model):
    purchase = models.ForeignKey(Purchase, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="purchase_items")
    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="sold_purchase_items")

    quantity = models.PositiveIntegerField()
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    total = models.DecimalField(max_digits=14, decimal_places=2)

    # Product snapshot at time of purchase
    product_name = models.CharField(max_length=32)
    product_sku = models.CharField(max_length=32)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"

    def __str__(self):
        return f"{self.quantity}x {self.product_name} in purchase {self.purchase_id}"


class SellerPaymentDetail(models.Model):
    """Proof of payment a buyer submitted for one seller of a purchase."""

    purchase = models.ForeignKey(Purchase, on_delete=models.CASCADE, related_name="payment_details")
    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="received_payments")
    proof_file = models.ForeignKey(StoredFile, on_delete=models.PROTECT, related_name="payment_details")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ["purchase", "seller"]  # One payment proof per seller per purchase
        ordering = ["seller"]
        app_label = "marketplace"

    def __str__(self):
        return f"Payment proof {self.proof_file_id} for seller {self.seller_id} in purchase {self.purchase_id}"
