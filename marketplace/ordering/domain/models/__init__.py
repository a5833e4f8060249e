from .purchase import Purchase, PurchaseItem, SellerPaymentDetail


__all__ = ["Purchase", "PurchaseItem", "SellerPaymentDetail"]
