"""
Shared fixtures for the error pages tests.

Builds a throwaway error files directory, a dict-backed environment
and an application wired to both, with its own Prometheus registry.
"""

from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from errorpages.core.config import Settings
from errorpages.domain.pages.ports import EnvironmentLookup
from errorpages.main import create_app

PAGES = {
    "404.html": "<h1>404 Not Found</h1>",
    "4xx.html": "<h1>Client error</h1>",
    "5xx.html": "<h1>Server error</h1>",
    "503.json": '{"error": "unavailable"}',
    "5xx.json": '{"error": "server"}',
    "refresh-fresha.json": '{"data": {"type": "version-check", "id": "fresha"}}',
    "refresh-shedul.json": '{"data": {"type": "version-check", "id": "shedul"}}',
}


class FakeEnvironment(EnvironmentLookup):
    """EnvironmentLookup backed by a plain dict that tests can mutate."""

    def __init__(self, values: Optional[dict[str, str]] = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def lookup(self, name: str) -> Optional[str]:
        return self.values.get(name)


def write_pages(root: Path, pages: dict[str, str]) -> Path:
    """Write ``pages`` (name -> text) under ``root`` and return it."""
    root.mkdir(parents=True, exist_ok=True)
    for name, text in pages.items():
        (root / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def error_files(tmp_path: Path) -> Path:
    return write_pages(tmp_path / "www", PAGES)


@pytest.fixture
def environment() -> FakeEnvironment:
    return FakeEnvironment()


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def settings(error_files: Path) -> Settings:
    return Settings(error_files_path=str(error_files), debug=False)


@pytest.fixture
def client(
    settings: Settings,
    environment: FakeEnvironment,
    registry: CollectorRegistry,
) -> TestClient:
    app = create_app(settings=settings, environment=environment, registry=registry)
    return TestClient(app)
