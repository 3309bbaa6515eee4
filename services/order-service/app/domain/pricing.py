"""
Price calculation for orders.

Pure functions: no I/O, no side effects.
"""

from decimal import ROUND_HALF_UP, Decimal

from .entities import Packaging, PricingConfig, Size

CENT = Decimal("0.01")


def round_to_cents(value: Decimal) -> float:
    """Round half away from zero at the cent boundary."""
    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


def calculate_price(
    config: PricingConfig,
    size: Size,
    packaging: Packaging,
    embroidery: bool,
) -> float:
    """
    Price an order under the given configuration.

    price = basePrice + packaging surcharge + (embroidery surcharge if requested)

    Size is accepted but does not change the price under the current rules.

    Args:
        config: Pricing configuration to apply
        size: Garment size
        packaging: Packaging option
        embroidery: Whether embroidery was requested

    Returns:
        Price rounded to 2 decimal places
    """
    # Decimal(str(...)) keeps 0.1 + 0.2 from drifting before rounding
    total = Decimal(str(config.base_price)) + Decimal(str(config.surcharge(packaging)))
    if embroidery:
        total += Decimal(str(config.embroidery))
    return round_to_cents(total)
