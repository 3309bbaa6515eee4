"""
Dashboard statistics endpoint.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_stats_service
from ..domain.exceptions import StorageException
from ..models import StatsResponse
from ..services.stats_service import StatsService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/stats", tags=["Stats"])


@router.get("", response_model=StatsResponse, summary="Order statistics")
def get_stats(service: StatsService = Depends(get_stats_service)):
    """Counts, revenue, breakdowns and the five most recent orders."""
    try:
        return service.compute()
    except StorageException as e:
        logger.error("Error fetching stats", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch statistics",
        ) from e
