from marketplace.catalog.domain.models import Category, Product, StoredFile
from marketplace.ordering.domain.models import Purchase, PurchaseItem, SellerPaymentDetail


__all__ = [
    "Category",
    "Product",
    "StoredFile",
    "Purchase",
    "PurchaseItem",
    "SellerPaymentDetail",
]
