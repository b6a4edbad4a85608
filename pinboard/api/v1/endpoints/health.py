"""Health check endpoints for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from pinboard.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Search service not configured", "model": ReadinessResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the search service was built at startup, else 503."""
    ready = getattr(request.app.state, "search_service", None) is not None
    if ready:
        return ReadinessResponse(search=True)
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="not_ready", search=False).model_dump(),
    )
