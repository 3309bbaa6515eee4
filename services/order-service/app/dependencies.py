"""
Shared dependencies for the application.

Services are built once during startup around a single DocumentStore and
handed to routers through FastAPI dependency injection.
"""

from typing import Optional

from .repositories.document_store import DocumentStore
from .services.config_service import ConfigService
from .services.order_service import OrderService
from .services.settings_service import SettingsService
from .services.stats_service import StatsService

_order_service: Optional[OrderService] = None
_config_service: Optional[ConfigService] = None
_settings_service: Optional[SettingsService] = None
_stats_service: Optional[StatsService] = None


def init_services(store: DocumentStore) -> None:
    """
    Build all services around the given store.

    Called by the main app during startup.
    """
    global _order_service, _config_service, _settings_service, _stats_service
    _order_service = OrderService(store)
    _config_service = ConfigService(store)
    _settings_service = SettingsService(store)
    _stats_service = StatsService(_order_service)


def reset_services() -> None:
    """Drop service instances. Called on shutdown."""
    global _order_service, _config_service, _settings_service, _stats_service
    _order_service = _config_service = _settings_service = _stats_service = None


def get_order_service() -> OrderService:
    if _order_service is None:
        raise RuntimeError("Order service not initialized")
    return _order_service


def get_config_service() -> ConfigService:
    if _config_service is None:
        raise RuntimeError("Config service not initialized")
    return _config_service


def get_settings_service() -> SettingsService:
    if _settings_service is None:
        raise RuntimeError("Settings service not initialized")
    return _settings_service


def get_stats_service() -> StatsService:
    if _stats_service is None:
        raise RuntimeError("Stats service not initialized")
    return _stats_service
