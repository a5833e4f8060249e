from prometheus_client import Counter, Histogram


# Purchase Metrics
purchases_created_total = Counter("marketplace_purchases_created_total", "Total purchases created")
purchase_creation_failures = Counter(
    "marketplace_purchase_creation_failures_total", "Purchase creation failures", ["reason"]
)
purchase_value = Histogram(
    "marketplace_purchase_value",
    "Purchase total distribution",
    buckets=[10000, 50000, 100000, 500000, 1000000, 5000000, 10000000, float("inf")],
)
purchase_sellers = Histogram(
    "marketplace_purchase_sellers",
    "Distinct sellers per purchase",
    buckets=[1, 2, 3, 5, 10, float("inf")],
)

# Payment Metrics
payments_confirmed_total = Counter("marketplace_payments_confirmed_total", "Total purchases confirmed as paid")
payment_confirmation_failures = Counter(
    "marketplace_payment_confirmation_failures_total", "Payment confirmation failures", ["reason"]
)

# Stock Metrics
stock_lock_wait_seconds = Histogram(
    "marketplace_stock_lock_wait_seconds",
    "Time spent acquiring a product row lock",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5, float("inf")],
)
