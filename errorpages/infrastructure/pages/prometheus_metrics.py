"""
Prometheus adapter for the RequestMetricsPort.

Collectors are registered on an explicit CollectorRegistry so each
application instance (and each test) owns its own metrics.
"""

from prometheus_client import CollectorRegistry, Counter, Histogram

from errorpages.domain.pages.entities import MetricSample
from errorpages.domain.pages.ports import RequestMetricsPort

DURATION_BUCKETS = (0.001, 0.003) + Histogram.DEFAULT_BUCKETS


class PrometheusRequestMetrics(RequestMetricsPort):
    """Request counter and duration histogram labelled by protocol."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self.request_count = Counter(
            "http_requests",
            "Counter of HTTP requests made.",
            ["proto"],
            registry=registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Histogram of the time (in seconds) each request took.",
            ["proto"],
            buckets=DURATION_BUCKETS,
            registry=registry,
        )

    def record(self, sample: MetricSample) -> None:
        self.request_count.labels(sample.protocol).inc()
        self.request_duration.labels(sample.protocol).observe(sample.duration_seconds)
