"""
Opaque settings bag, shallow-merged on update.
"""

from typing import Any

import structlog

from ..domain.exceptions import InvalidSettingsException
from ..metrics import track_settings_update, track_validation_failure
from ..repositories.document_store import DocumentStore

logger = structlog.get_logger(__name__)


class SettingsService:
    """Stores arbitrary JSON settings independent of orders and pricing."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get_settings(self) -> dict[str, Any]:
        with self.store.read() as document:
            return document.settings

    def update_settings(self, payload: Any) -> dict[str, Any]:
        """
        Shallow-merge ``payload`` into the stored settings.

        Raises:
            InvalidSettingsException: If payload is not a JSON object
            StorageException: If the document cannot be read or written
        """
        if not isinstance(payload, dict):
            track_validation_failure("settings")
            raise InvalidSettingsException()

        logger.debug("Updating settings", keys=sorted(payload))

        with self.store.transaction() as document:
            document.settings = {**document.settings, **payload}

        track_settings_update()
        logger.info("Settings updated", keys=sorted(document.settings))
        return document.settings
