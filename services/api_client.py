# -*- coding: utf-8 -*-
"""
MTCIT API Client
==================================================

Thin synchronous HTTP client for the maritime transactions backend. The
async repositories in repositories/api_repositories.py run it in worker
threads.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests
import urllib3

from services.error_mapper import extract_error_message
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

# Suppress SSL warnings for self-signed certificates in development
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Backend connection settings.

    Reads from .env file via Config when values are not given:
        API_BASE_URL=https://mtcit-gateway.example/
        API_TOKEN=...
    """
    base_url: str = None
    token: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class MaritimeApiClient:
    """
    HTTP access to the transaction endpoints.

    Features:
    - Bearer token (set by the host after login)
    - JSON and multipart bodies
    - Errors raised as ApiException (HTTP status) or NetworkException

    Usage:
        client = MaritimeApiClient(ApiConfig(base_url="http://localhost:8080"))
        body = client.post("api/v1/registration-requests", {"shipInfo": {...}})
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.access_token: Optional[str] = config.token or None
        self.session = session or requests.Session()

    def set_access_token(self, token: str):
        """Set the bearer token of the authenticated user."""
        self.access_token = token
        logger.debug("Access token updated")

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Any] = None,
        params: Optional[Dict] = None,
        files: Optional[List[Tuple[str, Tuple[str, bytes, str]]]] = None,
        form_data: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Endpoint path (e.g., "api/v1/inspection/create")
            json_data: JSON payload
            params: Query parameters
            files: Multipart file parts (field, (filename, content, mime))
            form_data: Multipart text parts sent with files

        Returns:
            Response JSON data (None for empty bodies)
        """
        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data is not None:
            try:
                logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")
            except (TypeError, ValueError):
                logger.debug(f"[API REQ] Body: {json_data}")

        try:
            response = self.session.request(
                method=method,
                url=self._url(endpoint),
                json=json_data if files is None else None,
                data=form_data if files is not None else None,
                files=files,
                params=params,
                headers=self._headers(json_body=files is None),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = response.json() if response.text else None

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result:
                res_str = json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                response_data = {}
            if not isinstance(response_data, dict):
                response_data = {"data": response_data}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=extract_error_message(response_data, default=str(e)),
                status_code=status_code,
                response_data=response_data,
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)

    # ==================== Verbs ====================

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, json_data: Optional[Any] = None) -> Any:
        return self._request("POST", endpoint, json_data=json_data)

    def put(self, endpoint: str, json_data: Optional[Any] = None) -> Any:
        return self._request("PUT", endpoint, json_data=json_data)

    def delete(self, endpoint: str) -> Any:
        return self._request("DELETE", endpoint)

    def upload(
        self,
        endpoint: str,
        file_paths: Dict[str, str],
        form_data: Optional[Dict] = None,
        method: str = "POST"
    ) -> Any:
        """
        Upload files as multipart parts.

        Args:
            endpoint: Endpoint path
            file_paths: Multipart field name -> local file path
            form_data: Additional text parts
        """
        import mimetypes
        from pathlib import Path

        parts = []
        for field_name, path in file_paths.items():
            file_path = Path(path)
            mime = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
            parts.append((field_name, (file_path.name, file_path.read_bytes(), mime)))
        return self._request(method, endpoint, files=parts, form_data=form_data or {})

    @staticmethod
    def unwrap(body: Any, default: Any = None) -> Any:
        """Backend wraps payloads as {"message", "statusCode", "data"}."""
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body if body is not None else default
