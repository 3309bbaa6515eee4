"""
Pricing configuration management.

Validates partial updates at the boundary and merges them into the
stored configuration.
"""

from typing import Any

import structlog

from ..domain.entities import PACKAGING_VALUES, PricingConfig, is_price_value
from ..domain.exceptions import InvalidConfigException
from ..metrics import track_config_update, track_validation_failure
from ..repositories.document_store import DocumentStore

logger = structlog.get_logger(__name__)


def validate_config_update(payload: Any) -> dict[str, Any]:
    """
    Validate a partial pricing configuration.

    Args:
        payload: Decoded JSON body

    Returns:
        The payload, known to be a well-formed partial config

    Raises:
        InvalidConfigException: If any present field is malformed
    """
    if not isinstance(payload, dict):
        raise InvalidConfigException("Invalid configuration data")

    if "basePrice" in payload and not is_price_value(payload["basePrice"]):
        raise InvalidConfigException(
            "Base price must be a positive number", field="basePrice"
        )

    if "packaging" in payload:
        packaging = payload["packaging"]
        if not isinstance(packaging, dict):
            raise InvalidConfigException(
                "Invalid packaging configuration", field="packaging"
            )
        for key, price in packaging.items():
            if key not in PACKAGING_VALUES or not is_price_value(price):
                raise InvalidConfigException(
                    "Invalid packaging configuration", field="packaging"
                )

    if "embroidery" in payload and not is_price_value(payload["embroidery"]):
        raise InvalidConfigException(
            "Embroidery price must be a positive number", field="embroidery"
        )

    return payload


class ConfigService:
    """Reads and updates the pricing configuration."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get_config(self) -> PricingConfig:
        """Current pricing configuration with all packaging keys present."""
        with self.store.read() as document:
            return document.config

    def update_config(self, payload: Any) -> PricingConfig:
        """
        Merge a partial configuration into the stored one.

        basePrice and embroidery are replaced when present; packaging is
        merged key by key so unspecified surcharges keep their value.

        Raises:
            InvalidConfigException: If the payload is malformed
            StorageException: If the document cannot be read or written
        """
        try:
            update = validate_config_update(payload)
        except InvalidConfigException as e:
            track_validation_failure("config")
            logger.info("Rejected config update", reason=e.message)
            raise

        with self.store.transaction() as document:
            config = document.config
            if "basePrice" in update:
                config.base_price = update["basePrice"]
            if "packaging" in update:
                config.packaging = {**config.packaging, **update["packaging"]}
            if "embroidery" in update:
                config.embroidery = update["embroidery"]

        track_config_update()
        logger.info("Pricing config updated", config=config.to_dict())
        return config
