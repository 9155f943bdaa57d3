"""
Health endpoint tests.
Supabase is mocked; no real DB calls.
"""

import os
import pytest
from unittest.mock import MagicMock, Mock, patch

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-key")

from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from app.main import app
    return TestClient(app)


class TestHealth:

    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestHealthDb:

    def test_reachable(self, client):
        mock_client = MagicMock()
        chain = mock_client.table.return_value.select.return_value.limit.return_value
        chain.execute.return_value = Mock(data=[])

        with patch("app.main.get_supabase_admin", return_value=mock_client):
            response = client.get("/health/db")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "reachable"}
        mock_client.table.assert_called_once_with("applications")

    def test_unconfigured_returns_503(self, client):
        with patch("app.main.get_supabase_admin", return_value=None):
            response = client.get("/health/db")

        assert response.status_code == 503
        assert "not configured" in response.json()["detail"]

    def test_query_failure_returns_503(self, client):
        mock_client = MagicMock()
        chain = mock_client.table.return_value.select.return_value.limit.return_value
        chain.execute.side_effect = Exception("connection refused")

        with patch("app.main.get_supabase_admin", return_value=mock_client):
            response = client.get("/health/db")

        assert response.status_code == 503
        assert response.json()["detail"] == "Database connection failed"
