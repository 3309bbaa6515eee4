"""
Pricing configuration endpoints.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, status

from ..dependencies import get_config_service
from ..domain.exceptions import StorageException
from ..models import ErrorResponse, PricingConfigResponse
from ..services.config_service import ConfigService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/config", tags=["Config"])


@router.get("", response_model=PricingConfigResponse, summary="Get pricing config")
def get_config(service: ConfigService = Depends(get_config_service)):
    try:
        return service.get_config().to_dict()
    except StorageException as e:
        logger.error("Error fetching config", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch configuration",
        ) from e


@router.post(
    "/update",
    response_model=PricingConfigResponse,
    summary="Update pricing config",
    responses={
        400: {"description": "Invalid configuration", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def update_config(
    payload: Any = Body(default=None),
    service: ConfigService = Depends(get_config_service),
):
    """
    Merge a partial config: ``{basePrice?, packaging?, embroidery?}``.

    Packaging surcharges not named in the body keep their current value.
    """
    try:
        return service.update_config(payload).to_dict()
    except StorageException as e:
        logger.error("Error updating config", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update configuration",
        ) from e
