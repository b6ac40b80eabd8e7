"""
FastAPI router for the error pages bounded context.

The ingress proxy forwards failed requests with their original path,
so the handler matches every path and method. All decisions are
delegated to use cases. Error mapping is handled by centralized
error handlers.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from errorpages.application.pages.dtos import (
    ErrorPageResult,
    RecordServedRequestCommand,
    ServeErrorPageQuery,
)
from errorpages.application.pages.record_served_request import (
    RecordServedRequestUseCase,
)
from errorpages.application.pages.serve_error_page import ServeErrorPageUseCase
from errorpages.interfaces.pages.dependencies import (
    get_record_served_request_use_case,
    get_serve_error_page_use_case,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["error-pages"])

ERROR_PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _after_body_sent(
    result: ErrorPageResult,
    recorder: RecordServedRequestUseCase,
    http_version: str,
    started_at: float,
) -> None:
    result.release()
    recorder.execute(
        RecordServedRequestCommand(
            http_version=http_version,
            started_at=started_at,
            finished_at=time.perf_counter(),
        )
    )


@router.api_route(
    "/{path:path}",
    methods=ERROR_PAGE_METHODS,
    include_in_schema=False,
    summary="Serve custom error page",
)
def serve_error_page(
    request: Request,
    use_case: ServeErrorPageUseCase = Depends(get_serve_error_page_use_case),
    recorder: RecordServedRequestUseCase = Depends(get_record_served_request_use_case),
) -> StreamingResponse:
    """Stream the error page selected from the proxy's X-* headers.

    Metrics are recorded once the body has been sent.
    """
    started_at = time.perf_counter()
    result = use_case.execute(
        ServeErrorPageQuery(
            headers=request.headers,
            origin=request.headers.get("origin", ""),
        )
    )
    return StreamingResponse(
        result.body,
        status_code=result.status_code,
        headers=result.headers,
        background=BackgroundTask(
            _after_body_sent,
            result,
            recorder,
            request.scope.get("http_version", "1.1"),
            started_at,
        ),
    )
