from django.urls import path

from .ordering.api.views import PurchaseConfirmView, PurchaseCreateView, marketplace_prometheus_metrics

app_name = "marketplace"

urlpatterns = [
    path("purchase", PurchaseCreateView.as_view(), name="purchase-create"),
    path("purchase/<str:purchase_id>", PurchaseConfirmView.as_view(), name="purchase-confirm"),
    # Prometheus metrics endpoint
    path("metrics", marketplace_prometheus_metrics, name="marketplace-metrics"),
]
