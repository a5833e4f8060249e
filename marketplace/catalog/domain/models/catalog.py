from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from .category import Category
from .file import StoredFile


class Product(models.Model):
    # Basic Information
    name = models.CharField(max_length=32)
    sku = models.CharField(max_length=32)

    # Seller and Category
    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="products")
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, blank=True, related_name="products")

    # Pricing and Inventory
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    stock_quantity = models.PositiveIntegerField(default=0)

    # Media
    file = models.ForeignKey(StoredFile, on_delete=models.SET_NULL, null=True, blank=True, related_name="products")

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["seller", "-created_at"], name="marketplace_seller__a1c3e0_idx"),
            models.Index(fields=["category", "-created_at"], name="marketplace_categor_5b2f7d_idx"),
            models.Index(fields=["sku"], name="marketplace_sku_9e4d21_idx"),
        ]

    def __str__(self):
        return self.name
