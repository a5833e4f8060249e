from django.conf import settings
from django.db import models


class SellerProfile(models.Model):
    """Payout destination of a seller, shown to buyers after they place an order."""

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="seller_profile")

    # Contact Information
    phone = models.CharField(max_length=20, blank=True)

    # Bank Information
    bank_account_name = models.CharField(max_length=32, blank=True)
    bank_account_holder = models.CharField(max_length=32, blank=True)
    bank_account_number = models.CharField(max_length=32, blank=True)

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "accounts"

    def __str__(self):
        return f"Seller profile of {self.user}"

    @property
    def has_bank_details(self) -> bool:
        return bool(self.bank_account_name and self.bank_account_holder and self.bank_account_number)
