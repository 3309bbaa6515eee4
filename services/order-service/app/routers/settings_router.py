"""
Settings endpoints. PUT and POST are equivalent.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, status

from ..dependencies import get_settings_service
from ..domain.exceptions import StorageException
from ..models import ErrorResponse, SettingsUpdateResponse
from ..services.settings_service import SettingsService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.get("", response_model=dict[str, Any], summary="Get settings")
def get_settings(service: SettingsService = Depends(get_settings_service)):
    try:
        return service.get_settings()
    except StorageException as e:
        logger.error("Error fetching settings", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch settings",
        ) from e


@router.api_route(
    "",
    methods=["PUT", "POST"],
    response_model=SettingsUpdateResponse,
    summary="Update settings",
    responses={
        400: {"description": "Invalid settings", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def update_settings(
    payload: Any = Body(default=None),
    service: SettingsService = Depends(get_settings_service),
):
    """Shallow-merge the body into the stored settings."""
    try:
        updated = service.update_settings(payload)
    except StorageException as e:
        logger.error("Error updating settings", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to update settings", "details": e.message},
        ) from e

    return SettingsUpdateResponse(success=True, settings=updated)
