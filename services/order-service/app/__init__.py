"""
Order Service Package.

Records custom-apparel orders, prices them from a mutable pricing
configuration, and exposes aggregate statistics over a single JSON document.
"""

__version__ = "1.0.0"
__description__ = "Custom-apparel order and pricing service"

__all__ = [
    "__version__",
]
