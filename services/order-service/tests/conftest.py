"""
Order Service Tests - Test Configuration.

Provides a document store on a temporary file, the services built on it,
and a TestClient whose lifespan points at the same temporary file.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.repositories.document_store import DocumentStore
from app.services.config_service import ConfigService
from app.services.order_service import OrderService
from app.services.settings_service import SettingsService
from app.services.stats_service import StatsService


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location of the JSON document for one test."""
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path: Path) -> DocumentStore:
    """Initialized document store on a fresh file."""
    document_store = DocumentStore(db_path)
    document_store.initialize()
    return document_store


@pytest.fixture
def order_service(store: DocumentStore) -> OrderService:
    return OrderService(store)


@pytest.fixture
def config_service(store: DocumentStore) -> ConfigService:
    return ConfigService(store)


@pytest.fixture
def settings_service(store: DocumentStore) -> SettingsService:
    return SettingsService(store)


@pytest.fixture
def stats_service(order_service: OrderService) -> StatsService:
    return StatsService(order_service)


@pytest.fixture
def read_document(db_path: Path):
    """Read the raw JSON document straight from disk."""

    def _read() -> Dict[str, Any]:
        return json.loads(db_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def client(db_path: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """TestClient with the service document stored under tmp_path."""
    monkeypatch.setattr(settings, "DB_PATH", db_path)
    monkeypatch.setattr(settings, "PUBLIC_DIR", tmp_path / "public")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_order_payload() -> Dict[str, Any]:
    """Order body priced at 48.00 under the default config."""
    return {
        "customer": "  Jane Doe  ",
        "size": "M",
        "packaging": "basic",
        "embroidery": False,
    }


@pytest.fixture
def sample_orders() -> List[Dict[str, Any]]:
    """Stored order records with known timestamps and prices."""
    return [
        {
            "id": "order-1",
            "customer": "Alice",
            "size": "M",
            "packaging": "basic",
            "embroidery": False,
            "price": 48,
            "date": "2024-03-01",
            "createdAt": "2024-03-01T09:00:00.000Z",
        },
        {
            "id": "order-2",
            "customer": "Bob",
            "size": "L",
            "packaging": "box",
            "embroidery": True,
            "price": 72,
            "date": "2024-03-02",
            "createdAt": "2024-03-02T09:00:00.000Z",
        },
        {
            "id": "order-3",
            "customer": "Carol",
            "size": "2XL",
            "packaging": "branded",
            "embroidery": True,
            "price": 70.1,
            "date": "2024-03-03",
            "createdAt": "2024-03-03T09:00:00.000Z",
        },
        {
            "id": "order-4",
            "customer": "Dan",
            "size": "XL",
            "packaging": "basic",
            "embroidery": False,
            "price": 48.2,
            "date": "2024-03-04",
        },
        {
            "id": "order-5",
            "customer": "Eve",
            "size": "M",
            "packaging": "branded",
            "embroidery": False,
            "price": 50,
            "date": "2024-03-05",
            "createdAt": "2024-03-05T09:00:00.000Z",
        },
        {
            "id": "order-6",
            "customer": "Frank",
            "size": "L",
            "packaging": "box",
            "embroidery": True,
            "price": 72,
            "date": "2024-03-06",
            "createdAt": "2024-03-06T09:00:00.000Z",
        },
    ]


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as API integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
