"""
Identity provider client.

These calls never go through the refresh path: they either mint the token
pair or operate on it directly.
"""

from typing import Any, Dict

from newsdesk.client.api.base import BaseApiClient, error_message
from newsdesk.client.api.types import ApiResponse, RefreshTokenResponse
from newsdesk.exceptions import (
    ApiConnectionException,
    ApiServerException,
    NoCredentialsException,
    ResponseDecodeException,
)
from newsdesk.logging import logger


class AuthApi(BaseApiClient):
    """Client for the /auth/ endpoints"""

    def _post_anonymous(self, path: str, data: Dict[str, Any]) -> Any:
        # Fresh credentials are being requested, so no stale bearer is attached
        result = self._send(path, "POST", None, data, None, None)
        return self._unwrap(result)

    @staticmethod
    def _unwrap(result: ApiResponse) -> Any:
        if not result.ok:
            raise ApiServerException(error_message(result), status_code=result.status, body=result.parsed_body)
        return result.parsed_body

    def register(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an account.

        Returns:
            The backend payload, ``{"user": {...}, "tokens": {"access", "refresh"}}``
        """
        return self._post_anonymous("/auth/register/", user_data)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in with email and password, returning ``{"user", "tokens"}``"""
        return self._post_anonymous("/auth/login/", {"email": email, "password": password})

    def google_auth(self, access_token: str) -> Dict[str, Any]:
        """Exchange a Google OAuth access token for a Newsdesk token pair"""
        return self._post_anonymous("/auth/google-auth/", {"access_token": access_token})

    def logout(self, refresh_token: str) -> bool:
        """
        Revoke the refresh token server-side.

        Returns:
            True if the backend accepted the logout. Failures, including an
            undecodable reply, are logged and reported as False; local state
            is the caller's to clear.
        """
        try:
            result = self.send("/auth/logout/", method="POST", body={"refresh_token": refresh_token})
        except (ApiConnectionException, ResponseDecodeException) as e:
            logger.error(f"Logout error: {e}")
            return False
        return result.ok

    def get_user_profile(self) -> Dict[str, Any]:
        """Fetch the profile of the logged-in user"""
        result = self.send("/auth/profile/")
        if not result.ok:
            raise ApiServerException("Failed to fetch profile", status_code=result.status, body=result.parsed_body)
        body = result.parsed_body
        return body.get("user") if isinstance(body, dict) else body

    def refresh_token(self, refresh_token: str) -> RefreshTokenResponse:
        """Exchange a refresh token for a new access token, returning ``{"access"}``"""
        if not refresh_token:
            raise NoCredentialsException()
        result = self._send(self.config.refresh_path, "POST", None, {"refresh": refresh_token}, None, None)
        if not result.ok:
            raise ApiServerException("Token refresh failed", status_code=result.status, body=result.parsed_body)
        return result.parsed_body

    def update_profile(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """Update the logged-in user's profile"""
        return self._unwrap(self.send("/auth/profile/update/", method="PUT", body=user_data))
