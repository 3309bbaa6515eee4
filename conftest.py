"""
Root conftest.py for the order service repository.

Puts each service directory on sys.path so its ``app`` package imports
the same way it does when the service runs from its own directory.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add service directories to sys.path before test collection.

    Only one service lives under services/, so its ``app`` package cannot
    clash with another service's.
    """
    services_dir = Path(__file__).parent / "services"

    for service_path in sorted(services_dir.iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
