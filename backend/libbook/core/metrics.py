"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, conflict, error
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking request latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

booking_cancellations = Counter(
    'booking_cancellations_total',
    'Bookings moved to CANCELLED'
)

# Seat metrics
seat_layout_replacements = Counter(
    'seat_layout_replacements_total',
    'Seat layout reconciliations applied'
)

seat_maintenance_toggles = Counter(
    'seat_maintenance_toggles_total',
    'Seat maintenance flag flips',
    ['state']  # on, off
)

# Store metrics
store_errors = Counter(
    'store_errors_total',
    'Requests that failed with a store error',
    ['operation']  # HTTP method of the failing request
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, conflict, error"""
    booking_attempts.labels(status=status).inc()


def record_booking_cancelled():
    booking_cancellations.inc()


def record_layout_replaced():
    seat_layout_replacements.inc()


def record_maintenance_toggle(is_maintenance: bool):
    seat_maintenance_toggles.labels(state="on" if is_maintenance else "off").inc()


def record_store_error(operation: str):
    store_errors.labels(operation=operation).inc()
