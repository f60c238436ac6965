from __future__ import annotations

from fastapi import APIRouter

from app.schemas.health import HealthResponse
from app.utils.timestamps import utc_timestamp

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint.

    Used by load balancers and monitoring systems to determine service health.
    Not rate limited.
    """

    return HealthResponse(status="healthy", timestamp=utc_timestamp())
