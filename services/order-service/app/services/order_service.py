"""
Order ledger.

Creates, lists and deletes orders against the document store. Prices are
always computed from the configuration read in the same transaction that
appends the order.
"""

from dataclasses import dataclass
from typing import Any, Optional

import structlog

from ..domain.entities import Order, Packaging, Size
from ..domain.exceptions import InvalidOrderException, OrderNotFoundException
from ..domain.pricing import calculate_price
from ..metrics import track_order_created, track_order_deleted, track_validation_failure
from ..repositories.document_store import DocumentStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderRequest:
    """A validated order payload."""

    customer: str
    size: Size
    packaging: Packaging
    embroidery: bool


def validate_order_payload(payload: Any) -> OrderRequest:
    """
    Validate an order payload and convert it to typed values.

    Args:
        payload: Decoded JSON body

    Returns:
        OrderRequest with trimmed customer name

    Raises:
        InvalidOrderException: On blank customer, unknown size or packaging
    """
    data = payload if isinstance(payload, dict) else {}

    customer = data.get("customer")
    if not isinstance(customer, str) or not customer.strip():
        raise InvalidOrderException(
            "Customer name is required", field="customer", value=customer
        )

    size = data.get("size")
    try:
        size_value = Size(size)
    except ValueError:
        raise InvalidOrderException(
            "Valid size is required (M, L, XL, 2XL)", field="size", value=size
        ) from None

    packaging = data.get("packaging")
    try:
        packaging_value = Packaging(packaging)
    except ValueError:
        raise InvalidOrderException(
            "Valid packaging type is required (basic, branded, box)",
            field="packaging",
            value=packaging,
        ) from None

    return OrderRequest(
        customer=customer.strip(),
        size=size_value,
        packaging=packaging_value,
        embroidery=bool(data.get("embroidery")),
    )


class OrderService:
    """Order lifecycle: create, list, delete."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def list_orders(self) -> list[dict[str, Any]]:
        """All orders in insertion order, oldest first, exactly as stored."""
        with self.store.read() as document:
            return document.orders

    def get_order(self, order_id: str) -> dict[str, Any]:
        """
        Look up a single order.

        Raises:
            OrderNotFoundException: If no order has this ID
        """
        with self.store.read() as document:
            index = self._find_index(document.orders, order_id)
            if index is None:
                raise OrderNotFoundException(order_id)
            return document.orders[index]

    def create_order(self, payload: Any) -> Order:
        """
        Validate, price and record a new order.

        Raises:
            InvalidOrderException: If the payload fails validation
            StorageException: If the document cannot be read or written
        """
        try:
            request = validate_order_payload(payload)
        except InvalidOrderException as e:
            track_validation_failure("order")
            logger.info("Rejected order", reason=e.message, field=e.details.get("field"))
            raise

        with self.store.transaction() as document:
            price = calculate_price(
                document.config, request.size, request.packaging, request.embroidery
            )
            order = Order.new(
                customer=request.customer,
                size=request.size,
                packaging=request.packaging,
                embroidery=request.embroidery,
                price=price,
            )
            document.orders.append(order.to_dict())

        track_order_created(order.size.value, order.packaging.value)
        logger.info(
            "Order created",
            order_id=order.id,
            size=order.size.value,
            packaging=order.packaging.value,
            embroidery=order.embroidery,
            price=order.price,
        )
        return order

    def delete_order(self, order_id: Optional[str]) -> dict[str, Any]:
        """
        Remove the first order with the given ID.

        Returns:
            The removed order record

        Raises:
            InvalidOrderException: If the ID is empty or missing
            OrderNotFoundException: If no order has this ID
            StorageException: If the document cannot be read or written
        """
        if not order_id:
            raise InvalidOrderException("Order ID is required", field="id")

        with self.store.transaction() as document:
            index = self._find_index(document.orders, order_id)
            if index is None:
                raise OrderNotFoundException(order_id)
            deleted = document.orders.pop(index)

        track_order_deleted()
        logger.info("Order deleted", order_id=order_id)
        return deleted

    @staticmethod
    def _find_index(orders: list[dict[str, Any]], order_id: str) -> Optional[int]:
        for index, order in enumerate(orders):
            if order.get("id") == order_id:
                return index
        return None
