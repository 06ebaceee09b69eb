# -*- coding: utf-8 -*-
"""Custom exceptions for the transaction engine."""


class ApiException(Exception):
    """Exception raised when a backend call fails (non-2xx or rejected body)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code in (401, 403)

    @property
    def is_server_error(self) -> bool:
        return bool(self.status_code) and self.status_code >= 500

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class InconsistentStateException(Exception):
    """Raised when resumed wizard data lacks something a later step needs.

    The user has to restart the transaction; the engine never guesses a
    missing request id.
    """

    def __init__(self, message: str, missing_key: str = None):
        super().__init__(message)
        self.message = message
        self.missing_key = missing_key
