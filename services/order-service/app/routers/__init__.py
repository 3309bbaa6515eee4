"""
API routers for order service endpoints.
"""

from . import config_router, health_router, orders_router, settings_router, stats_router

__all__ = [
    "orders_router",
    "config_router",
    "settings_router",
    "stats_router",
    "health_router",
]
