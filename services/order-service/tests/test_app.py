"""
Order Service Tests - API Tests.

Exercises the HTTP surface end to end against a temporary document file.
"""

import asyncio
import json
from typing import Any, Dict

import pytest

from app.domain.exceptions import StorageException

pytestmark = pytest.mark.integration


class TestOrdersApi:
    """Tests for /api/orders."""

    def test_list_empty(self, client) -> None:
        response = client.get("/api/orders")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_order(self, client, valid_order_payload: Dict[str, Any]) -> None:
        response = client.post("/api/orders", json=valid_order_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["customer"] == "Jane Doe"
        assert data["size"] == "M"
        assert data["packaging"] == "basic"
        assert data["embroidery"] is False
        assert data["price"] == 48.0
        assert set(data) == {
            "id",
            "customer",
            "size",
            "packaging",
            "embroidery",
            "price",
            "date",
            "createdAt",
        }
        assert data["createdAt"].endswith("Z")

    def test_created_order_is_listed(self, client, valid_order_payload) -> None:
        created = client.post("/api/orders", json=valid_order_payload).json()

        assert client.get("/api/orders").json() == [created]

    def test_create_embroidered_box(self, client) -> None:
        response = client.post(
            "/api/orders",
            json={"customer": "Bob", "size": "L", "packaging": "box", "embroidery": True},
        )

        assert response.status_code == 201
        assert response.json()["price"] == 72.0

    @pytest.mark.parametrize(
        "override,message",
        [
            ({"customer": ""}, "Customer name is required"),
            ({"size": "XXL"}, "Valid size is required (M, L, XL, 2XL)"),
            ({"packaging": "gift"}, "Valid packaging type is required (basic, branded, box)"),
        ],
    )
    def test_create_validation_errors(
        self, client, valid_order_payload, override, message
    ) -> None:
        response = client.post("/api/orders", json={**valid_order_payload, **override})

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert client.get("/api/orders").json() == []

    def test_create_with_malformed_json(self, client) -> None:
        response = client.post(
            "/api/orders",
            content="{broken",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON payload"}

    def test_delete_order(self, client, valid_order_payload) -> None:
        created = client.post("/api/orders", json=valid_order_payload).json()

        response = client.delete(f"/api/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Order deleted successfully",
            "deletedOrder": created,
        }
        assert client.get("/api/orders").json() == []

    def test_delete_unknown_order(self, client, valid_order_payload) -> None:
        client.post("/api/orders", json=valid_order_payload)

        response = client.delete("/api/orders/unknown-id")

        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}
        assert len(client.get("/api/orders").json()) == 1

    def test_get_order(self, client, valid_order_payload) -> None:
        created = client.post("/api/orders", json=valid_order_payload).json()

        response = client.get(f"/api/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_order(self, client) -> None:
        response = client.get("/api/orders/unknown-id")

        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    def test_delete_whitespace_id_is_not_found(self, client) -> None:
        response = client.delete("/api/orders/%20")

        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    def test_delete_without_id(self, client) -> None:
        response = client.delete("/api/orders")

        assert response.status_code == 400
        assert response.json() == {"error": "Order ID is required"}

    def test_storage_failure_returns_generic_error(self, client, monkeypatch) -> None:
        def fail(*args, **kwargs):
            raise StorageException("load", "disk unavailable")

        monkeypatch.setattr(client.app.state.store, "load", fail)

        response = client.get("/api/orders")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch orders"}


class TestConfigApi:
    """Tests for /api/config."""

    def test_get_default_config(self, client) -> None:
        response = client.get("/api/config")

        assert response.status_code == 200
        assert response.json() == {
            "basePrice": 45.0,
            "packaging": {"basic": 3.0, "branded": 5.0, "box": 7.0},
            "embroidery": 20.0,
        }

    def test_update_packaging_partially(self, client) -> None:
        response = client.post("/api/config/update", json={"packaging": {"basic": 10}})

        assert response.status_code == 200
        assert response.json()["packaging"] == {"basic": 10.0, "branded": 5.0, "box": 7.0}

    def test_update_affects_new_orders(self, client, valid_order_payload) -> None:
        client.post("/api/config/update", json={"basePrice": 50, "packaging": {"basic": 4}})

        order = client.post("/api/orders", json=valid_order_payload).json()

        assert order["price"] == 54.0

    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"basePrice": -1}, "Base price must be a positive number"),
            ({"embroidery": "free"}, "Embroidery price must be a positive number"),
            ({"packaging": {"gift": 2}}, "Invalid packaging configuration"),
        ],
    )
    def test_update_validation_errors(self, client, payload, message) -> None:
        response = client.post("/api/config/update", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert client.get("/api/config").json()["basePrice"] == 45.0

    def test_update_with_huge_integer_is_rejected(self, client) -> None:
        response = client.post(
            "/api/config/update",
            content='{"basePrice": ' + "9" * 400 + "}",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Base price must be a positive number"}

    def test_storage_failure_on_update(self, client, monkeypatch) -> None:
        def fail(*args, **kwargs):
            raise StorageException("save", "read-only file system")

        monkeypatch.setattr(client.app.state.store, "save", fail)

        response = client.post("/api/config/update", json={"basePrice": 10})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update configuration"}


class TestSettingsApi:
    """Tests for /api/settings."""

    def test_get_empty_settings(self, client) -> None:
        response = client.get("/api/settings")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.parametrize("method", ["put", "post"])
    def test_update_settings(self, client, method) -> None:
        client.request(method.upper(), "/api/settings", json={"theme": "dark"})
        response = client.request(method.upper(), "/api/settings", json={"lang": "de"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "settings": {"theme": "dark", "lang": "de"},
        }
        assert client.get("/api/settings").json() == {"theme": "dark", "lang": "de"}

    def test_update_settings_rejects_non_object(self, client) -> None:
        response = client.put("/api/settings", json=["dark"])

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid settings data"}

    def test_storage_failure_includes_details(self, client, monkeypatch) -> None:
        def fail(*args, **kwargs):
            raise StorageException("save", "disk full")

        monkeypatch.setattr(client.app.state.store, "save", fail)

        response = client.put("/api/settings", json={"theme": "dark"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to update settings",
            "details": "Storage save failed: disk full",
        }


class TestStatsApi:
    """Tests for /api/stats."""

    def test_stats_after_orders(self, client, valid_order_payload) -> None:
        first = client.post("/api/orders", json=valid_order_payload).json()
        second = client.post(
            "/api/orders",
            json={"customer": "Bob", "size": "2XL", "packaging": "box", "embroidery": True},
        ).json()

        response = client.get("/api/stats")

        assert response.status_code == 200
        stats = response.json()
        assert stats["totalOrders"] == 2
        assert stats["totalRevenue"] == 120.0
        assert stats["sizeBreakdown"] == {"M": 1, "L": 0, "XL": 0, "2XL": 1}
        assert stats["packagingBreakdown"] == {"basic": 1, "branded": 0, "box": 1}
        assert stats["embroideryCount"] == 1
        assert {o["id"] for o in stats["recentOrders"]} == {first["id"], second["id"]}


class TestServiceEndpoints:
    """Health, metrics, frontend and durability."""

    def test_health(self, client) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["version"] == "1.0.0"
        assert data["timestamp"].endswith("Z")

    @pytest.mark.parametrize(
        "method,path,body",
        [
            ("GET", "/api/orders", None),
            ("POST", "/api/orders", {"customer": "Ann", "size": "L", "packaging": "box"}),
            ("GET", "/api/config", None),
            ("POST", "/api/config/update", {"basePrice": 40}),
            ("PUT", "/api/settings", {"theme": "dark"}),
            ("GET", "/api/stats", None),
        ],
    )
    def test_store_is_not_used_on_the_event_loop(
        self, client, monkeypatch, method, path, body
    ) -> None:
        store = client.app.state.store
        original_load = store.load
        on_event_loop = []

        def recording_load():
            try:
                asyncio.get_running_loop()
                on_event_loop.append(True)
            except RuntimeError:
                on_event_loop.append(False)
            return original_load()

        monkeypatch.setattr(store, "load", recording_load)

        response = client.request(method, path, json=body)

        assert response.status_code < 300
        assert on_event_loop and not any(on_event_loop)

    def test_request_id_is_echoed(self, client) -> None:
        response = client.get("/api/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_metrics_endpoint(self, client, valid_order_payload) -> None:
        client.post("/api/orders", json=valid_order_payload)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "order_service_orders_created_total" in response.text

    def test_frontend_missing(self, client) -> None:
        response = client.get("/")

        assert response.status_code == 404
        assert response.json() == {"error": "Frontend not found"}

    def test_frontend_served(self, client, tmp_path) -> None:
        public = tmp_path / "public"
        public.mkdir()
        (public / "index.html").write_text("<html>ScrubU</html>")

        response = client.get("/")

        assert response.status_code == 200
        assert "ScrubU" in response.text

    def test_document_on_disk_matches_responses(
        self, client, db_path, valid_order_payload
    ) -> None:
        """Every successful mutation is durable before the response is sent."""
        order = client.post("/api/orders", json=valid_order_payload).json()
        config = client.post("/api/config/update", json={"embroidery": 25}).json()
        settings = client.put("/api/settings", json={"theme": "dark"}).json()["settings"]

        on_disk = json.loads(db_path.read_text())

        assert on_disk["orders"] == [order]
        assert on_disk["config"] == config
        assert on_disk["settings"] == settings

    def test_startup_heals_corrupted_document(self, db_path, tmp_path, monkeypatch) -> None:
        from fastapi.testclient import TestClient

        from app.config import settings
        from app.main import app

        db_path.write_text("this is not json")
        monkeypatch.setattr(settings, "DB_PATH", db_path)
        monkeypatch.setattr(settings, "PUBLIC_DIR", tmp_path / "public")

        with TestClient(app) as test_client:
            assert test_client.get("/api/orders").json() == []

        assert json.loads(db_path.read_text())["orders"] == []
