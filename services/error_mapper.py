# -*- coding: utf-8 -*-
"""Centralized error message mapper.

Backend failures reach the user only through these functions: the raw
backend text is logged, the user sees a localized message keyed on the
status code.
"""

from typing import Optional

from services.translation_manager import tr
from services.exceptions import (
    ApiException, ValidationException, NetworkException, InconsistentStateException
)
from utils.logger import get_logger

logger = get_logger(__name__)

_STATUS_KEYS = {
    400: "error.api.bad_request",
    401: "error.api.unauthorized",
    403: "error.api.forbidden",
    404: "error.api.not_found",
    406: "error.api.not_acceptable",
    409: "error.api.conflict",
}


def map_api_error(error: ApiException) -> str:
    """Map API exception to a localized user-facing message.

    Technical details are logged only.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}) [{error.context or '-'}]: {error}")

    if status in _STATUS_KEYS:
        return tr(_STATUS_KEYS[status])
    if status and status >= 500:
        return tr("error.api.server")
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else error.message or ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a localized user-friendly message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, InconsistentStateException):
        logger.warning(f"Inconsistent wizard state ({error.missing_key}): {error.message}")
        return tr("error.transaction.restart_required")

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return tr("error.validation.generic")

    logger.warning(f"Unexpected error [{context or '-'}]: {error}")
    return tr("error.api.connection")


def extract_error_message(response_data: Optional[dict], default: str = "") -> str:
    """Pull the backend's own message out of an error body.

    Looks at "message", then "error", then "details"/"title", and finally
    the first entry of a validation "errors" structure.
    """
    if not response_data or not isinstance(response_data, dict):
        return default

    for key in ("message", "error", "details", "title"):
        value = response_data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        if isinstance(value, dict):
            nested = extract_error_message(value)
            if nested:
                return nested

    details = _extract_validation_details(response_data)
    if details:
        return details.splitlines()[0].lstrip("• ")
    return default


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return ""
