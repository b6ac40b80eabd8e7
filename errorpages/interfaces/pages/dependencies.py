"""
Dependency injection for the error pages bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. The adapters
themselves are created once in ``create_app`` and kept on
``app.state``.
"""

from fastapi import Request

from errorpages.application.pages.record_served_request import (
    RecordServedRequestUseCase,
)
from errorpages.application.pages.serve_error_page import ServeErrorPageUseCase
from errorpages.core.config import REFRESH_ROUTES, REFRESH_SERVICE_NAME
from errorpages.domain.pages.override import OverrideResolver


def get_serve_error_page_use_case(request: Request) -> ServeErrorPageUseCase:
    """Build ServeErrorPageUseCase with its infrastructure dependencies."""
    state = request.app.state
    return ServeErrorPageUseCase(
        page_store=state.page_store,
        override_resolver=OverrideResolver(
            routes=REFRESH_ROUTES,
            environment=state.environment,
            service_name=REFRESH_SERVICE_NAME,
        ),
        debug=state.settings.debug,
    )


def get_record_served_request_use_case(
    request: Request,
) -> RecordServedRequestUseCase:
    """Build RecordServedRequestUseCase with the app's metrics adapter."""
    return RecordServedRequestUseCase(metrics_port=request.app.state.request_metrics)
