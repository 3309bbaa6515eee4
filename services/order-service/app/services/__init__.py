"""
Service layer - order ledger, pricing config, settings and statistics.
"""

from .config_service import ConfigService
from .order_service import OrderService
from .settings_service import SettingsService
from .stats_service import StatsService

__all__ = ["ConfigService", "OrderService", "SettingsService", "StatsService"]
