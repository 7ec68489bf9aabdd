"""
Base API client classes for making HTTP requests.

This module provides the foundation for all API clients in the Newsdesk SDK:
header preparation, body encoding, response decoding and the
refresh-once-on-401 discipline.
"""

from typing import Any, Dict, Optional

import requests

from newsdesk.client.api.types import ApiResponse, FormData
from newsdesk.client.auth_manager import AuthManager
from newsdesk.client.http.http_client import HttpClient
from newsdesk.config import Config
from newsdesk.exceptions import ApiServerException, ResponseDecodeException
from newsdesk.logging import logger

JSON_CONTENT_TYPE = "application/json"

# Headers a caller can't override; the auth manager owns them
PROTECTED_HEADERS = ("authorization",)


def decode_response(response: requests.Response) -> ApiResponse:
    """
    Decode a response body into the normalized envelope.

    The body is parsed as JSON only when the response declares a JSON content
    type; anything else is returned as text. Error responses are decoded too,
    since they carry the server's message.

    Raises:
        ResponseDecodeException: If a declared-JSON body is malformed
    """
    content_type = response.headers.get("Content-Type") or ""
    status = response.status_code

    if JSON_CONTENT_TYPE in content_type.lower():
        if not response.content:
            parsed_body = None
        else:
            try:
                parsed_body = response.json()
            except ValueError as e:
                raise ResponseDecodeException(f"Malformed JSON in response (status={status}): {e}", status) from e
    else:
        parsed_body = response.text

    return ApiResponse(parsed_body=parsed_body, status=status, ok=200 <= status < 300)


def error_message(result: ApiResponse) -> str:
    """Pick the server-provided message out of an error body, falling back to the status"""
    body = result.parsed_body
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"HTTP error, status={result.status}"


class BaseApiClient:
    """
    Base class for API communication.

    Holds the endpoint, the shared auth manager and the config. Subclasses add
    one method per backend route and call ``request()``.
    """

    def __init__(self, endpoint: str, auth_manager: Optional[AuthManager] = None, config: Optional[Config] = None):
        """
        Initialize the base API client.

        Args:
            endpoint: The base URL for the API
            auth_manager: Source of bearer credentials; None for anonymous calls
            config: Client configuration
        """
        self.endpoint = endpoint.rstrip("/")
        self.auth_manager = auth_manager
        self.config = config or Config()
        self.http_client = HttpClient()

    def prepare_headers(
        self,
        body: Any = None,
        custom_headers: Optional[Dict[str, str]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, str]:
        """
        Prepare headers for API requests.

        Args:
            body: The request body; a FormData body gets no Content-Type
            custom_headers: Additional headers to include
            access_token: Bearer token to send, if any

        Returns:
            Headers dictionary
        """
        headers: Dict[str, str] = {}

        if not isinstance(body, FormData):
            headers["Content-Type"] = JSON_CONTENT_TYPE

        csrf_token = self.http_client.get_cookie(self.config.csrf_cookie_name)
        if csrf_token:
            headers[self.config.csrf_header_name] = csrf_token

        if custom_headers:
            for key, value in custom_headers.items():
                if key.lower() in PROTECTED_HEADERS:
                    continue
                if isinstance(body, FormData) and key.lower() == "content-type":
                    continue
                headers[key] = value

        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        return headers

    def _get_full_url(self, path: str) -> str:
        """
        Get the full URL for a path.

        Args:
            path: The API endpoint path

        Returns:
            The full URL
        """
        return f"{self.endpoint}{path}"

    def _send(
        self,
        path: str,
        method: str,
        headers: Optional[Dict[str, str]],
        body: Any,
        params: Optional[Dict[str, Any]],
        access_token: Optional[str],
    ) -> ApiResponse:
        kwargs: Dict[str, Any] = {}
        if isinstance(body, FormData):
            body.rewind()
            kwargs["data"] = body.fields
            kwargs["files"] = body.files or None
        elif isinstance(body, (str, bytes)):
            kwargs["data"] = body
        elif body is not None:
            kwargs["json"] = body

        response = self.http_client.request(
            method,
            self._get_full_url(path),
            headers=self.prepare_headers(body, headers, access_token),
            params=params,
            timeout=self.config.timeout,
            **kwargs,
        )
        return decode_response(response)

    def send(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """
        Make a single request and return the decoded envelope, whatever the status.

        No refresh is attempted and no status raises.

        Raises:
            ApiConnectionException: If the transport fails
            ResponseDecodeException: If a declared-JSON body is malformed
        """
        if not path or not isinstance(path, str):
            raise ValueError("path is required")

        access_token = self.auth_manager.get_access_token() if self.auth_manager else None
        return self._send(path, method, headers, body, params, access_token)

    def request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an authenticated request and return the decoded body.

        A 401 with a stored refresh token triggers one refresh and one retry of
        the original request. The retried response is final: a second 401 is
        not refreshed again.

        Args:
            path: API endpoint path, e.g. "/news/"
            method: HTTP method, GET by default
            headers: Extra request headers
            body: dict/list for JSON, str/bytes for a raw body, FormData for a form
            params: Query string parameters

        Returns:
            The parsed JSON body, or the text body for non-JSON responses

        Raises:
            ApiServerException: For any non-success final response
            ApiConnectionException: If the transport fails
            ResponseDecodeException: If a declared-JSON body is malformed
        """
        if not path or not isinstance(path, str):
            raise ValueError("path is required")

        access_token = self.auth_manager.get_access_token() if self.auth_manager else None
        result = self._send(path, method, headers, body, params, access_token)
        if result.ok:
            return result.parsed_body

        if result.status == 401 and self.auth_manager and self.auth_manager.get_refresh_token():
            logger.debug(f"{method.upper()} {path} unauthorized, refreshing access token")
            new_access = self.auth_manager.refresh(stale_access=access_token)
            if new_access:
                result = self._send(path, method, headers, body, params, new_access)
                if result.ok:
                    return result.parsed_body

        message = error_message(result)
        logger.debug(f"{method.upper()} {path} failed: {message}")
        raise ApiServerException(message, status_code=result.status, body=result.parsed_body)

    def get(self, path: str, **kwargs) -> Any:
        """Make GET request"""
        return self.request(path, method="GET", **kwargs)

    def post(self, path: str, data: Any = None, **kwargs) -> Any:
        """Make POST request"""
        return self.request(path, method="POST", body=data, **kwargs)

    def put(self, path: str, data: Any = None, **kwargs) -> Any:
        """Make PUT request"""
        return self.request(path, method="PUT", body=data, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        """Make DELETE request"""
        return self.request(path, method="DELETE", **kwargs)
