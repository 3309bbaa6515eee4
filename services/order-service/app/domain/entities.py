"""
Domain entities for orders and pricing.

Core business objects: the order record, the pricing configuration and the
persisted document that holds them. Entities convert to and from the
camelCase JSON shape used on disk and on the wire.
"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class Size(str, Enum):
    """Garment sizes accepted on an order."""

    M = "M"
    L = "L"
    XL = "XL"
    XXL = "2XL"


class Packaging(str, Enum):
    """Packaging options, each with its own surcharge."""

    BASIC = "basic"
    BRANDED = "branded"
    BOX = "box"


SIZE_VALUES = tuple(size.value for size in Size)
PACKAGING_VALUES = tuple(packaging.value for packaging in Packaging)

DEFAULT_BASE_PRICE = 45
DEFAULT_PACKAGING_PRICES = {"basic": 3, "branded": 5, "box": 7}
DEFAULT_EMBROIDERY_PRICE = 20


def is_finite_number(value: Any) -> bool:
    """
    Check that a JSON value is a number representable as a finite float.

    Booleans are rejected even though ``bool`` subclasses ``int``. Integers
    too large for a float are rejected rather than raising OverflowError.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_price_value(value: Any) -> bool:
    """Check that a JSON value is usable as a price component."""
    return is_finite_number(value) and value >= 0


def format_instant(moment: datetime) -> str:
    """Render an instant as UTC ISO-8601 with milliseconds and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class PricingConfig:
    """
    Mutable pricing parameters.

    ``packaging`` always carries all three packaging keys.
    """

    base_price: float = DEFAULT_BASE_PRICE
    packaging: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_PACKAGING_PRICES)
    )
    embroidery: float = DEFAULT_EMBROIDERY_PRICE

    def surcharge(self, packaging: Packaging) -> float:
        """Surcharge for a packaging option."""
        return self.packaging.get(packaging.value, 0)

    @classmethod
    def from_dict(cls, data: Any) -> "PricingConfig":
        """
        Build a config from stored JSON, shallow-merged over the defaults.

        Missing or unusable values fall back to the default for that field,
        and missing packaging keys are filled in one by one.
        """
        if not isinstance(data, dict):
            return cls()

        base_price = data.get("basePrice", DEFAULT_BASE_PRICE)
        embroidery = data.get("embroidery", DEFAULT_EMBROIDERY_PRICE)

        packaging = dict(DEFAULT_PACKAGING_PRICES)
        stored_packaging = data.get("packaging")
        if isinstance(stored_packaging, dict):
            for key in PACKAGING_VALUES:
                if is_price_value(stored_packaging.get(key)):
                    packaging[key] = stored_packaging[key]

        return cls(
            base_price=base_price if is_price_value(base_price) else DEFAULT_BASE_PRICE,
            packaging=packaging,
            embroidery=(
                embroidery if is_price_value(embroidery) else DEFAULT_EMBROIDERY_PRICE
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "basePrice": self.base_price,
            "packaging": {key: self.packaging[key] for key in PACKAGING_VALUES},
            "embroidery": self.embroidery,
        }


@dataclass(frozen=True)
class Order:
    """
    A recorded order.

    Immutable once created; removed only by deletion.
    """

    id: str
    customer: str
    size: Size
    packaging: Packaging
    embroidery: bool
    price: float
    date: str
    created_at: str

    @classmethod
    def new(
        cls,
        customer: str,
        size: Size,
        packaging: Packaging,
        embroidery: bool,
        price: float,
        now: Optional[datetime] = None,
    ) -> "Order":
        """
        Create an order with a fresh ID and creation stamps.

        ``date`` is the server-local calendar date; ``created_at`` is the
        same instant in UTC.
        """
        moment = (now or datetime.now()).astimezone()
        return cls(
            id=str(uuid.uuid4()),
            customer=customer,
            size=size,
            packaging=packaging,
            embroidery=embroidery,
            price=price,
            date=moment.date().isoformat(),
            created_at=format_instant(moment),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customer": self.customer,
            "size": self.size.value,
            "packaging": self.packaging.value,
            "embroidery": self.embroidery,
            "price": self.price,
            "date": self.date,
            "createdAt": self.created_at,
        }


@dataclass
class Document:
    """
    Root persisted aggregate.

    Orders stay as the JSON records found in the file so that listing
    returns them unchanged.
    """

    orders: list[dict[str, Any]] = field(default_factory=list)
    config: PricingConfig = field(default_factory=PricingConfig)
    settings: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "Document":
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        """Normalise a stored JSON object into a document."""
        orders = data.get("orders")
        settings = data.get("settings")
        return cls(
            orders=[order for order in orders if isinstance(order, dict)]
            if isinstance(orders, list)
            else [],
            config=PricingConfig.from_dict(data.get("config")),
            settings=dict(settings) if isinstance(settings, dict) else {},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "orders": list(self.orders),
            "config": self.config.to_dict(),
            "settings": dict(self.settings),
        }
