"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, metrics, then the catch-all error page handler)
- Error handlers (centralized domain-to-HTTP mapping)
- Infrastructure adapters (page store, environment, Prometheus registry)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from prometheus_client import CollectorRegistry

from errorpages.core.config import Settings, settings as default_settings
from errorpages.domain.pages.ports import EnvironmentLookup
from errorpages.infrastructure.pages.filesystem_page_store import (
    FileSystemErrorPageStore,
)
from errorpages.infrastructure.pages.os_environment import OsEnvironmentLookup
from errorpages.infrastructure.pages.prometheus_metrics import (
    PrometheusRequestMetrics,
)
from errorpages.interfaces.health import router as health_router
from errorpages.interfaces.metrics import router as metrics_router
from errorpages.interfaces.pages.router import router as pages_router
from errorpages.shared.errors.handlers import register_error_handlers
from errorpages.shared.logging import configure_logging


def create_app(
    settings: Settings | None = None,
    environment: EnvironmentLookup | None = None,
    registry: CollectorRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the service.

    Args:
        settings: Settings to use; defaults to the environment-loaded ones.
        environment: Source of maintenance content; defaults to os.environ.
        registry: Prometheus registry; a fresh one is created if omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, access_log=settings.access_log)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        # Every path belongs to the error page handler
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    registry = registry if registry is not None else CollectorRegistry()
    app.state.settings = settings
    app.state.environment = environment or OsEnvironmentLookup()
    app.state.page_store = FileSystemErrorPageStore(settings.error_files_path)
    app.state.metrics_registry = registry
    app.state.request_metrics = PrometheusRequestMetrics(registry)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    # The error page handler matches every path, so it is registered last.
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(pages_router)

    return app


app = create_app()
