"""Prometheus metrics for planning, catalog loading and notifications."""

from prometheus_client import Counter, Histogram

# Itinerary synthesis metrics
synthesis_latency_ms = Histogram(
    "synthesis_latency_ms",
    "Itinerary synthesis latency in milliseconds",
    ["outcome"],
    buckets=[0.5, 1, 2, 5, 10, 25, 50, 100, 250],
)

itinerary_generations_total = Counter(
    "itinerary_generations_total",
    "Total itinerary generation attempts",
    ["outcome"],
)

# Catalog loader metrics
catalog_fetch_errors_total = Counter(
    "catalog_fetch_errors_total",
    "Total catalog relation fetch failures",
    ["relation"],
)

# Outbound notification metrics
notification_failures_total = Counter(
    "notification_failures_total",
    "Total booking notification failures",
    ["booking_type"],
)


class PrometheusPlannerMetrics:
    """Prometheus-based planner metrics implementation."""

    def record_synthesis(self, outcome: str, latency_ms: float) -> None:
        """Record one synthesis attempt."""
        synthesis_latency_ms.labels(outcome=outcome).observe(latency_ms)
        itinerary_generations_total.labels(outcome=outcome).inc()

    def inc_catalog_error(self, relation: str) -> None:
        """Increment catalog fetch error counter."""
        catalog_fetch_errors_total.labels(relation=relation).inc()

    def inc_notification_failure(self, booking_type: str) -> None:
        """Increment notification failure counter."""
        notification_failures_total.labels(booking_type=booking_type).inc()


metrics = PrometheusPlannerMetrics()
