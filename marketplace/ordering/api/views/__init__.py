from .prometheus_metrics import marketplace_prometheus_metrics
from .purchase_views import PurchaseConfirmView, PurchaseCreateView, error_response

__all__ = ["PurchaseConfirmView", "PurchaseCreateView", "error_response", "marketplace_prometheus_metrics"]
