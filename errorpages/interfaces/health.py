"""
Health check router.

Provides the liveness endpoint probed by the kubelet.
No business logic. Always answers 200 with an empty body.
"""

from fastapi import APIRouter, Response

router = APIRouter(tags=["health"])


@router.get(
    "/healthz",
    summary="Health check",
    description="Returns 200 while the process is able to serve requests.",
)
def health_check() -> Response:
    """Return an empty 200 response."""
    return Response(status_code=200)
