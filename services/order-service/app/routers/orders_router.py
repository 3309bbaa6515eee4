"""
Order endpoints: list, get, create, delete.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, status

from ..dependencies import get_order_service
from ..domain.exceptions import StorageException
from ..models import DeleteOrderResponse, ErrorResponse, OrderResponse
from ..services.order_service import OrderService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get(
    "",
    response_model=list[dict[str, Any]],
    summary="List orders",
    responses={500: {"model": ErrorResponse}},
)
def list_orders(service: OrderService = Depends(get_order_service)):
    """All orders, oldest first."""
    try:
        return service.list_orders()
    except StorageException as e:
        logger.error("Error fetching orders", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch orders",
        ) from e


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create order",
    responses={
        400: {"description": "Invalid order", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_order(
    payload: Any = Body(default=None),
    service: OrderService = Depends(get_order_service),
):
    """
    Create an order priced from the current pricing configuration.

    Body: ``{customer, size, packaging, embroidery?}``
    """
    try:
        order = service.create_order(payload)
    except StorageException as e:
        logger.error("Error creating order", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create order",
        ) from e
    return order.to_dict()


@router.get(
    "/{order_id}",
    response_model=dict[str, Any],
    summary="Get order",
    responses={
        404: {"description": "Order not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
):
    try:
        return service.get_order(order_id)
    except StorageException as e:
        logger.error("Error fetching order", order_id=order_id, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch order",
        ) from e


@router.delete(
    "",
    status_code=status.HTTP_400_BAD_REQUEST,
    include_in_schema=False,
)
async def delete_order_without_id():
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail="Order ID is required"
    )


@router.delete(
    "/{order_id}",
    response_model=DeleteOrderResponse,
    summary="Delete order",
    responses={
        400: {"model": ErrorResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
):
    try:
        deleted = service.delete_order(order_id)
    except StorageException as e:
        logger.error("Error deleting order", order_id=order_id, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete order",
        ) from e

    return DeleteOrderResponse(message="Order deleted successfully", deleted_order=deleted)
