"""Prometheus metrics for monitoring."""

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

# Create registry
registry = CollectorRegistry()

# API metrics
api_requests_total = Counter(
    "routegate_api_requests_total",
    "Total API requests",
    ["method", "status"],
    registry=registry,
)

api_requests_in_flight = Gauge(
    "routegate_api_requests_in_flight",
    "In-flight API requests",
    registry=registry,
)

# Dispatch metrics
dispatch_total = Counter(
    "routegate_dispatch_total",
    "Dispatched gateway requests",
    ["route_key", "status"],
    registry=registry,
)

dispatch_duration_seconds = Histogram(
    "routegate_dispatch_duration_seconds",
    "Gateway dispatch duration",
    ["route_key"],
    registry=registry,
)

# Route resolution metrics
route_lookups_total = Counter(
    "routegate_route_lookups_total",
    "Route key lookups",
    ["source", "result"],
    registry=registry,
)

# Downstream metrics
downstream_requests_total = Counter(
    "routegate_downstream_requests_total",
    "Downstream calls made by protocol adapters",
    ["adapter", "outcome"],
    registry=registry,
)


class Metrics:
    """Metrics wrapper for easy access."""

    def __init__(self):
        self.api_requests_total = api_requests_total
        self.api_requests_in_flight = api_requests_in_flight
        self.dispatch_total = dispatch_total
        self.dispatch_duration_seconds = dispatch_duration_seconds
        self.route_lookups_total = route_lookups_total
        self.downstream_requests_total = downstream_requests_total
        self.registry = registry


metrics = Metrics()
