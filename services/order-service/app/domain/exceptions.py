"""
Custom exceptions for the order service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, file system).
"""

from typing import Any, Optional


class OrderServiceException(Exception):
    """Base exception for all order service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputException(OrderServiceException):
    """Base for client input errors. Never retried."""


class InvalidOrderException(InvalidInputException):
    """Raised when an order payload fails validation."""

    def __init__(self, reason: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=reason,
            details={"field": field, "value": None if value is None else str(value)},
        )


class InvalidConfigException(InvalidInputException):
    """Raised when a pricing configuration update fails validation."""

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(message=reason, details={"field": field})


class InvalidSettingsException(InvalidInputException):
    """Raised when a settings update is not a JSON object."""

    def __init__(self, reason: str = "Invalid settings data"):
        super().__init__(message=reason)


class OrderNotFoundException(OrderServiceException):
    """Raised when no order with the given ID exists."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(message="Order not found", details={"order_id": order_id})


class StorageException(OrderServiceException):
    """Raised when the document store cannot be read or written."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        self.operation = operation
        self.reason = reason
        message = f"Storage {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
