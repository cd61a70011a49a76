"""
Prometheus metrics for the key inventory service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Gauge, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Inventory metrics
keys_ingested_total = Counter(
    "keys_ingested_total",
    "Total keys stocked by bulk adds",
    ["tier"],
)

keys_duplicates_total = Counter(
    "keys_duplicates_total",
    "Total candidate keys rejected as duplicates",
    ["tier"],
)

keys_removed_total = Counter(
    "keys_removed_total",
    "Total keys withdrawn by admins",
    ["tier"],
)

# Allocation metrics
keys_assigned_total = Counter(
    "keys_assigned_total",
    "Total keys issued to orders",
    ["tier"],
)

allocation_out_of_stock_total = Counter(
    "allocation_out_of_stock_total",
    "Total allocation attempts that found an empty pool",
    ["tier"],
)

# Current state metrics
pool_available_keys = Gauge(
    "pool_available_keys",
    "Available keys per tier, as of the last stats read",
    ["tier"],
)

# Order metrics
orders_created_total = Counter(
    "orders_created_total",
    "Total orders created",
    ["tier"],
)

payment_events_total = Counter(
    "payment_events_total",
    "Total payment events received",
    ["status"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
