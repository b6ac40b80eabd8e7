"""
Metrics router.

Exposes the application's Prometheus registry in the text
exposition format.
"""

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["metrics"])


@router.get("/metrics", summary="Prometheus metrics", include_in_schema=False)
def metrics(request: Request) -> Response:
    """Render every collector registered on the application registry."""
    payload = generate_latest(request.app.state.metrics_registry)
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)
