"""Health Probe — liveness endpoint.

Invariants:
    - GET /health always returns 200 {"status": "ok"} if the process is up
    - Never calls the upstream service
"""

from fastapi import APIRouter, status

from tabrelay.schemas.tab import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe."""
    return {"status": "ok"}
