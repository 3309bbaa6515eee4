"""
Read-only statistics over the order ledger.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from ..domain.entities import PACKAGING_VALUES, SIZE_VALUES, is_finite_number
from ..domain.pricing import round_to_cents
from .order_service import OrderService

RECENT_ORDERS_LIMIT = 5


def parse_order_time(order: dict[str, Any]) -> Optional[datetime]:
    """
    Creation instant of an order, from ``createdAt`` or else ``date``.

    Naive values are treated as UTC so that all results compare.
    """
    for key in ("createdAt", "date"):
        value = order.get(key)
        if not isinstance(value, str) or not value:
            continue
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def recent_orders(
    orders: list[dict[str, Any]], limit: int = RECENT_ORDERS_LIMIT
) -> list[dict[str, Any]]:
    """
    Most recently created orders, newest first.

    Ties (and orders without a usable timestamp) are ordered by reverse
    insertion order. The input list is not reordered.
    """
    oldest = datetime.min.replace(tzinfo=timezone.utc)
    indexed = [
        (parse_order_time(order) or oldest, index, order)
        for index, order in enumerate(orders)
    ]
    indexed.sort(key=lambda item: (item[0], item[1]), reverse=True)
    return [order for _, _, order in indexed[:limit]]


class StatsService:
    """Aggregates counts, revenue and breakdowns from the current orders."""

    def __init__(self, order_service: OrderService):
        self.order_service = order_service

    def compute(self) -> dict[str, Any]:
        orders = self.order_service.list_orders()

        revenue = sum(
            (
                Decimal(str(order["price"]))
                for order in orders
                if is_finite_number(order.get("price"))
            ),
            Decimal(0),
        )

        return {
            "totalOrders": len(orders),
            "totalRevenue": round_to_cents(revenue),
            "sizeBreakdown": {
                size: sum(1 for order in orders if order.get("size") == size)
                for size in SIZE_VALUES
            },
            "packagingBreakdown": {
                packaging: sum(1 for order in orders if order.get("packaging") == packaging)
                for packaging in PACKAGING_VALUES
            },
            "embroideryCount": sum(1 for order in orders if order.get("embroidery")),
            "recentOrders": recent_orders(orders),
        }
