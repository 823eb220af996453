"""Tests for application wiring: middleware, metadata routes and logging."""

import json
import logging
import pytest
from fastapi.testclient import TestClient

from prodcats.core.logging_config import (
    AUDIT_LOGGER_NAME,
    CatalogJsonFormatter,
    log_catalog_event,
)


@pytest.fixture
def app_client():
    """Client for the real application; lifespan is not entered."""
    from prodcats.main import app

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestApplication:
    def test_root(self, app_client):
        response = app_client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "ProdCats"

    def test_health(self, app_client):
        response = app_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_security_headers(self, app_client):
        response = app_client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_correlation_id_generated(self, app_client):
        response = app_client.get("/health")

        assert response.headers["X-Correlation-ID"]

    def test_correlation_id_echoed(self, app_client):
        response = app_client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_cors_preflight(self, app_client):
        response = app_client.options(
            "/api/products",
            headers={
                "Origin": "http://localhost:4200",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:4200"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_cors_rejects_unknown_origin(self, app_client):
        response = app_client.options(
            "/api/products",
            headers={
                "Origin": "http://evil.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert "access-control-allow-origin" not in response.headers


@pytest.mark.unit
class TestLogging:
    def test_json_formatter_fields(self):
        formatter = CatalogJsonFormatter("%(message)s")
        record = logging.LogRecord(
            AUDIT_LOGGER_NAME, logging.INFO, __file__, 42, "Product 1 created", None, None
        )
        record.correlation_id = "corr-1"
        record.event_type = "product.created"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Product 1 created"
        assert payload["level"] == "INFO"
        assert payload["logger"] == AUDIT_LOGGER_NAME
        assert payload["correlation_id"] == "corr-1"
        assert payload["event_type"] == "product.created"
        assert payload["source"]["line"] == 42
        assert payload["timestamp"].endswith("Z")

    def test_log_catalog_event(self, caplog):
        with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER_NAME):
            log_catalog_event(
                event_type="product.deleted",
                message="Product 7 soft deleted",
                entity="product",
                entity_id=7,
                ip_address="10.0.0.1",
            )

        record = caplog.records[-1]
        assert record.event_type == "product.deleted"
        assert record.entity == "product"
        assert record.entity_id == 7
        assert record.ip_address == "10.0.0.1"

    def test_mutations_are_audited(self, client, test_category, caplog):
        with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER_NAME):
            response = client.post(
                "/api/products",
                json={"name": "Lamp", "price": 20, "categoryId": test_category.id},
            )

        assert response.status_code == 201
        events = [getattr(r, "event_type", None) for r in caplog.records]
        assert "product.created" in events
