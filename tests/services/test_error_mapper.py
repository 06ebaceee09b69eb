# -*- coding: utf-8 -*-
"""
Tests for the error mapper.

Tests cover:
- Status code to localized message
- Network timeouts vs. connection failures
- Inconsistent state and validation errors
- Backend message extraction
"""

import pytest

from services.error_mapper import extract_error_message, map_exception
from services.exceptions import (
    ApiException, InconsistentStateException, NetworkException, ValidationException,
)
from services.translation_manager import set_language, tr


class TestApiErrors:
    """Test API error mapping."""

    @pytest.mark.parametrize("status, key", [
        (400, "error.api.bad_request"),
        (401, "error.api.unauthorized"),
        (404, "error.api.not_found"),
        (406, "error.api.not_acceptable"),
        (409, "error.api.conflict"),
        (500, "error.api.server"),
        (503, "error.api.server"),
    ])
    def test_status_codes(self, status, key):
        """Test each status maps to its message."""
        assert map_exception(ApiException("boom", status_code=status)) == tr(key)

    def test_raw_backend_text_hidden(self):
        """Test the backend text never reaches the user."""
        message = map_exception(ApiException("NullPointerException at line 42", status_code=500))
        assert "NullPointerException" not in message
        assert message == "حدث خطأ في الخادم. يرجى المحاولة لاحقاً."

    def test_context_filled_in(self):
        """Test the mapping context is recorded on the exception."""
        error = ApiException("boom", status_code=500)
        map_exception(error, context="SHIP_WEIGHTS")
        assert error.context == "SHIP_WEIGHTS"

    def test_english_messages(self):
        """Test messages follow the current language."""
        set_language("en")
        assert map_exception(ApiException("boom", status_code=403)) == \
            "You are not allowed to perform this action."


class TestOtherErrors:
    """Test non-HTTP errors."""

    def test_timeout(self):
        """Test timeouts get their own message."""
        error = NetworkException("request failed", original_error=TimeoutError("read timed out"))
        assert map_exception(error) == tr("error.api.timeout")

    def test_connection(self):
        """Test other network failures."""
        assert map_exception(NetworkException("connection refused")) == tr("error.api.connection")

    def test_inconsistent_state(self):
        """Test missing wizard data asks for a restart."""
        error = InconsistentStateException("requestId missing", missing_key="requestId")
        assert map_exception(error) == tr("error.transaction.restart_required")

    def test_validation(self):
        """Test validation failures."""
        error = ValidationException("bad crew file", field="crewExcelFile")
        assert map_exception(error) == tr("error.validation.generic")


class TestExtractErrorMessage:
    """Test reading the backend's own message."""

    def test_message_key(self):
        """Test the message key wins."""
        assert extract_error_message({"message": "Ship is mortgaged", "error": "x"}) == "Ship is mortgaged"

    def test_nested_error(self):
        """Test a nested error object."""
        assert extract_error_message({"error": {"message": "Expired"}}) == "Expired"

    def test_validation_errors(self):
        """Test the first validation entry."""
        body = {"errors": {"imoNumber": ["must be 7 digits"]}}
        assert extract_error_message(body) == "imoNumber: must be 7 digits"

    def test_default(self):
        """Test the default for empty bodies."""
        assert extract_error_message(None, default="-") == "-"
