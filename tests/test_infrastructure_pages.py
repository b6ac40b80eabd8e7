"""
Tests for the error pages infrastructure adapters.

Filesystem store on a temporary directory, Prometheus adapter on an
isolated registry, environment adapter on a plain dict.
"""

from pathlib import Path

import pytest
from prometheus_client import CollectorRegistry

from errorpages.domain.pages.entities import MetricSample
from errorpages.domain.pages.errors import ErrorPageUnavailableError
from errorpages.infrastructure.pages.filesystem_page_store import (
    CHUNK_SIZE,
    FileSystemErrorPageStore,
)
from errorpages.infrastructure.pages.os_environment import OsEnvironmentLookup
from errorpages.infrastructure.pages.prometheus_metrics import (
    PrometheusRequestMetrics,
)


class TestFileSystemErrorPageStore:
    """Tests for the FileSystemErrorPageStore adapter."""

    def test_streams_file_and_closes_handle(self, error_files: Path) -> None:
        page = FileSystemErrorPageStore(error_files).open("404.html")
        assert b"".join(page.chunks()) == (error_files / "404.html").read_bytes()
        assert page.closed

    def test_large_file_streamed_in_chunks(self, tmp_path: Path) -> None:
        (tmp_path / "500.html").write_bytes(b"x" * (CHUNK_SIZE * 2 + 10))
        chunks = list(FileSystemErrorPageStore(tmp_path).open("500.html").chunks())
        assert [len(c) for c in chunks] == [CHUNK_SIZE, CHUNK_SIZE, 10]

    def test_missing_file_raises_unavailable(self, tmp_path: Path) -> None:
        with pytest.raises(ErrorPageUnavailableError) as excinfo:
            FileSystemErrorPageStore(tmp_path).open("418.html")
        assert excinfo.value.filename == "418.html"

    def test_directory_is_unavailable(self, tmp_path: Path) -> None:
        (tmp_path / "404.html").mkdir()
        with pytest.raises(ErrorPageUnavailableError):
            FileSystemErrorPageStore(tmp_path).open("404.html")

    def test_close_is_idempotent(self, error_files: Path) -> None:
        page = FileSystemErrorPageStore(error_files).open("4xx.html")
        page.close()
        page.close()
        assert page.closed

    def test_describe(self, tmp_path: Path) -> None:
        assert FileSystemErrorPageStore(tmp_path).describe("5xx.html") == str(
            tmp_path / "5xx.html"
        )


class TestPrometheusRequestMetrics:
    """Tests for the PrometheusRequestMetrics adapter."""

    def test_record_increments_count_and_duration(self) -> None:
        registry = CollectorRegistry()
        metrics = PrometheusRequestMetrics(registry)
        metrics.record(MetricSample(protocol="1.1", duration_seconds=0.002))
        metrics.record(MetricSample(protocol="1.1", duration_seconds=0.004))
        metrics.record(MetricSample(protocol="2.0", duration_seconds=0.5))

        assert registry.get_sample_value("http_requests_total", {"proto": "1.1"}) == 2
        assert registry.get_sample_value("http_requests_total", {"proto": "2.0"}) == 1
        assert registry.get_sample_value(
            "http_request_duration_seconds_count", {"proto": "1.1"}
        ) == 2
        assert registry.get_sample_value(
            "http_request_duration_seconds_sum", {"proto": "1.1"}
        ) == pytest.approx(0.006)
        assert registry.get_sample_value(
            "http_request_duration_seconds_bucket", {"proto": "1.1", "le": "0.003"}
        ) == 1

    def test_registries_are_independent(self) -> None:
        first = CollectorRegistry()
        PrometheusRequestMetrics(first).record(MetricSample("1.1", 0.1))
        second = CollectorRegistry()
        PrometheusRequestMetrics(second)
        assert second.get_sample_value("http_requests_total", {"proto": "1.1"}) is None


class TestOsEnvironmentLookup:
    """Tests for the OsEnvironmentLookup adapter."""

    def test_reads_live_mapping(self) -> None:
        environ: dict[str, str] = {}
        lookup = OsEnvironmentLookup(environ)
        assert lookup.lookup("REFRESH_FRESHA_MAINTENANCE") is None
        environ["REFRESH_FRESHA_MAINTENANCE"] = "down"
        assert lookup.lookup("REFRESH_FRESHA_MAINTENANCE") == "down"

    def test_defaults_to_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("REFRESH_SHEDUL_MAINTENANCE", "later")
        assert OsEnvironmentLookup().lookup("REFRESH_SHEDUL_MAINTENANCE") == "later"
