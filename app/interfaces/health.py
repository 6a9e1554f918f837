"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports the running version and the locales error messages are
offered in.
"""

from fastapi import APIRouter, Request

from app.interfaces.finance.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and supported locales.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        version=settings.version,
        locales=list(settings.supported_locales),
    )
