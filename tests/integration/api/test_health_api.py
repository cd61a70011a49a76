"""
Integration tests for health, readiness and metrics endpoints.
"""

import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Tests for operational endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_db(self, client):
        response = client.get(reverse("health-db"))
        assert response.json() == {"status": "healthy", "database": "connected"}

    def test_ready(self, client):
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True, "cache": True}

    def test_correlation_id_is_echoed(self, client):
        response = client.get(reverse("health"), HTTP_X_CORRELATION_ID="corr-123")
        assert response["X-Correlation-ID"] == "corr-123"

    def test_metrics_exposes_request_counters(self, client, api_client):
        api_client.get(reverse("admin_api:key-stats"), HTTP_X_ADMIN_KEY="test-admin-key")

        response = client.get(reverse("metrics"))

        assert response.status_code == 200
        body = response.content.decode()
        assert "http_requests_total" in body
        assert "pool_available_keys" in body
