"""
Use case: Record instrumentation for a request whose body was emitted.

Input: RecordServedRequestCommand (HTTP version, start and end timings)
Output: MetricSample
Side effects: Increments the request counter and observes the duration.
"""

import logging

from errorpages.application.pages.dtos import RecordServedRequestCommand
from errorpages.domain.pages.entities import MetricSample
from errorpages.domain.pages.ports import RequestMetricsPort

logger = logging.getLogger(__name__)


class RecordServedRequestUseCase:
    """Turns request timings into a MetricSample and records it."""

    def __init__(self, metrics_port: RequestMetricsPort) -> None:
        self._metrics_port = metrics_port

    def execute(self, command: RecordServedRequestCommand) -> MetricSample:
        sample = MetricSample.from_timings(
            command.http_version, command.started_at, command.finished_at
        )
        self._metrics_port.record(sample)
        logger.debug(
            "Recorded request proto=%s duration=%.6fs",
            sample.protocol,
            sample.duration_seconds,
        )
        return sample
