"""
Session state for an authenticated user.

``SessionManager`` keeps the logged-in user alongside the token pair held by
the auth manager. Other components learn that the session ended through
``AuthManager.on_session_end`` callbacks instead of polling this object.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

import jwt

from newsdesk.exceptions import ApiConnectionException, ApiServerException, ResponseDecodeException
from newsdesk.helpers.tokens import is_token_expired
from newsdesk.logging import logger

if TYPE_CHECKING:
    from newsdesk.client.api.endpoints.auth import AuthApi
    from newsdesk.client.api.types import CredentialPair
    from newsdesk.client.auth_manager import AuthManager

REQUEST_ERRORS = (ApiServerException, ApiConnectionException, ResponseDecodeException)


class SessionManager:
    """Logs users in and out and restores a stored session on startup"""

    def __init__(self, auth_api: "AuthApi", auth_manager: "AuthManager"):
        self.auth_api = auth_api
        self.auth_manager = auth_manager
        self.user: Optional[Dict[str, Any]] = None
        auth_manager.on_session_end(self._forget_user)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def tokens(self) -> Optional["CredentialPair"]:
        return self.auth_manager.get_credentials()

    def _forget_user(self, reason: str) -> None:
        self.user = None

    def _start(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        tokens = payload.get("tokens") if isinstance(payload, dict) else None
        if not tokens or not tokens.get("access"):
            raise ApiServerException("Authentication response did not contain tokens", body=payload)

        self.auth_manager.set_credentials({"access": tokens["access"], "refresh": tokens.get("refresh") or ""})
        self.user = payload.get("user")
        logger.info(f"Logged in as {(self.user or {}).get('email', 'unknown user')}")
        return payload

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in and store the issued token pair. Errors propagate to the caller."""
        return self._start(self.auth_api.login(email, password))

    def register(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._start(self.auth_api.register(user_data))

    def google_auth(self, access_token: str) -> Dict[str, Any]:
        return self._start(self.auth_api.google_auth(access_token))

    def check_auth(self) -> bool:
        """
        Restore the session from stored credentials.

        An unexpired access token is used to load the profile; an expired one is
        refreshed first. A token that can't be decoded, a failed refresh or a
        failed profile fetch all end the session.

        Returns:
            True if a user is now loaded
        """
        access = self.auth_manager.get_access_token()
        if not access:
            return False

        try:
            expired = is_token_expired(access)
        except jwt.InvalidTokenError as e:
            logger.error(f"Invalid token: {e}")
            self.logout()
            return False

        if expired:
            return self.refresh()
        return self.fetch_user_profile()

    def fetch_user_profile(self) -> bool:
        try:
            self.user = self.auth_api.get_user_profile()
        except REQUEST_ERRORS as e:
            logger.error(f"Error fetching user profile: {e}")
            self.logout()
            return False
        return True

    def refresh(self) -> bool:
        """
        Swap the refresh token for a new access token, then reload the profile.

        The exchange goes through ``AuthManager.refresh`` so it shares the lock
        with 401-triggered refreshes. When it fails the auth manager has already
        dropped the pair; the refresh token is still revoked server-side.
        """
        credentials = self.auth_manager.get_credentials()
        if not credentials or not credentials.get("refresh"):
            self.logout()
            return False

        if not self.auth_manager.refresh(stale_access=credentials.get("access")):
            self.auth_api.logout(credentials["refresh"])
            self.user = None
            return False

        return self.fetch_user_profile()

    def logout(self) -> None:
        """Revoke the refresh token server-side when possible, then always drop local state"""
        refresh_token = self.auth_manager.get_refresh_token()
        try:
            if refresh_token:
                self.auth_api.logout(refresh_token)
        finally:
            self.user = None
            self.auth_manager.end_session("logout")
