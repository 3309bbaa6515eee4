"""Pydantic models for API responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderResponse(BaseModel):
    """A recorded order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer: str
    size: str = Field(..., description="M, L, XL or 2XL")
    packaging: str = Field(..., description="basic, branded or box")
    embroidery: bool = False
    price: float = Field(..., ge=0)
    date: str = Field(..., description="Server-local creation date (YYYY-MM-DD)")
    created_at: str = Field(..., alias="createdAt", description="Creation instant (UTC)")


class DeleteOrderResponse(BaseModel):
    """Response for a deleted order."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_order: dict[str, Any] = Field(..., alias="deletedOrder")


class PricingConfigResponse(BaseModel):
    """Current pricing configuration."""

    model_config = ConfigDict(populate_by_name=True)

    base_price: float = Field(..., alias="basePrice", ge=0)
    packaging: dict[str, float]
    embroidery: float = Field(..., ge=0)


class SettingsUpdateResponse(BaseModel):
    """Response for a settings update."""

    success: bool = True
    settings: dict[str, Any]


class StatsResponse(BaseModel):
    """Aggregate order statistics."""

    model_config = ConfigDict(populate_by_name=True)

    total_orders: int = Field(..., alias="totalOrders")
    total_revenue: float = Field(..., alias="totalRevenue")
    size_breakdown: dict[str, int] = Field(..., alias="sizeBreakdown")
    packaging_breakdown: dict[str, int] = Field(..., alias="packagingBreakdown")
    embroidery_count: int = Field(..., alias="embroideryCount")
    recent_orders: list[dict[str, Any]] = Field(..., alias="recentOrders")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str
    details: Optional[str] = None
