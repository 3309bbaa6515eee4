"""
Health check router.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from ..config import settings
from ..domain.entities import format_instant
from ..models import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check():
    """Always returns 200 OK while the service is running."""
    return HealthResponse(
        status="OK",
        timestamp=format_instant(datetime.now(timezone.utc)),
        version=settings.SERVICE_VERSION,
    )
