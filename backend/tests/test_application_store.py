"""
Unit tests for the Supabase applications insert.
Tests mock the Supabase client; no real API calls.
"""

import os
from unittest.mock import MagicMock, Mock, patch

import httpx
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod

# Mock environment variables before importing app modules
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-key")

from app.models.application import ApplicationRecord, ApplicationType
from app.services.application_store import insert_application

VALID_BIO = "I have spent a decade shooting campaigns for brands across the US."


def _make_record() -> ApplicationRecord:
    return ApplicationRecord(
        type=ApplicationType.TALENT,
        name="Jo",
        email="jo@x.com",
        bio=VALID_BIO,
        primary_discipline="Photography",
    )


def _make_client(execute_side_effect=None) -> MagicMock:
    client = MagicMock()
    execute = client.table.return_value.insert.return_value.execute
    if execute_side_effect is not None:
        execute.side_effect = execute_side_effect
    else:
        execute.return_value = Mock(data=[])
    return client


class TestInsertApplication:
    """Test the single best-effort insert and its result mapping."""

    def test_successful_insert_returns_ok(self):
        record = _make_record()
        client = _make_client()

        with patch("app.services.application_store.get_supabase_admin", return_value=client):
            result = insert_application(record)

        assert result.ok is True
        client.table.assert_called_once_with("applications")
        client.table.return_value.insert.assert_called_once_with(
            record.to_row(), returning=ReturnMethod.minimal
        )
        client.table.return_value.insert.return_value.execute.assert_called_once()

    def test_api_error_returns_failure_with_code(self):
        error = APIError({
            "message": "new row violates row-level security policy",
            "code": "42501",
            "hint": None,
            "details": None,
        })
        client = _make_client(execute_side_effect=error)

        with patch("app.services.application_store.get_supabase_admin", return_value=client):
            result = insert_application(_make_record())

        assert result.ok is False
        assert result.code == "42501"
        assert "row-level security" in result.detail

    def test_transport_error_returns_failure(self):
        client = _make_client(execute_side_effect=httpx.ConnectError("connection refused"))

        with patch("app.services.application_store.get_supabase_admin", return_value=client):
            result = insert_application(_make_record())

        assert result.ok is False
        assert "connection refused" in result.detail

    def test_no_retry_on_failure(self):
        client = _make_client(execute_side_effect=httpx.ReadTimeout("timed out"))

        with patch("app.services.application_store.get_supabase_admin", return_value=client):
            insert_application(_make_record())

        assert client.table.return_value.insert.return_value.execute.call_count == 1

    def test_unconfigured_client_returns_failure(self):
        with patch("app.services.application_store.get_supabase_admin", return_value=None):
            result = insert_application(_make_record())

        assert result.ok is False
        assert result.detail == "not_configured"
