import threading
from typing import Callable, List, Optional

from newsdesk.client.api.types import CredentialPair
from newsdesk.client.credentials import CredentialStore
from newsdesk.client.http.http_client import HttpClient
from newsdesk.exceptions import ApiConnectionException, ResponseDecodeException, TokenRefreshException
from newsdesk.logging import logger

SessionEndCallback = Callable[[str], None]


class AuthManager:
    """Manages the stored token pair and the refresh round trip"""

    def __init__(self, store: CredentialStore, refresh_url: str, timeout: int = 30):
        """
        Initialize the authentication manager.

        Args:
            store: Where the access/refresh pair lives
            refresh_url: The full URL of the token refresh endpoint
            timeout: Request timeout in seconds for the refresh call
        """
        self.store = store
        self.refresh_url = refresh_url
        self.timeout = timeout
        self._refresh_lock = threading.Lock()
        self._session_end_callbacks: List[SessionEndCallback] = []

    def get_credentials(self) -> Optional[CredentialPair]:
        return self.store.get()

    def get_access_token(self) -> Optional[str]:
        credentials = self.store.get()
        if not credentials:
            return None
        return credentials.get("access") or None

    def get_refresh_token(self) -> Optional[str]:
        credentials = self.store.get()
        if not credentials:
            return None
        return credentials.get("refresh") or None

    def set_credentials(self, credentials: CredentialPair) -> None:
        self.store.set(credentials)

    def on_session_end(self, callback: SessionEndCallback) -> None:
        """Register a callback fired with a reason whenever the stored credentials are dropped"""
        self._session_end_callbacks.append(callback)

    def end_session(self, reason: str) -> None:
        """Clear the stored credentials and notify listeners"""
        self.store.clear()
        logger.debug(f"Session ended: {reason}")
        for callback in list(self._session_end_callbacks):
            try:
                callback(reason)
            except Exception as e:
                logger.error(f"Session end callback {callback!r} failed: {e}")

    def refresh(self, stale_access: Optional[str] = None) -> Optional[str]:
        """
        Exchange the refresh token for a new access token.

        Refreshes are serialized. A caller that waited on the lock while another
        caller replaced ``stale_access`` gets that new token without a second
        round trip.

        Args:
            stale_access: The access token the failed request was sent with

        Returns:
            The new access token, or None if the refresh failed. On failure the
            stored credentials are cleared.
        """
        with self._refresh_lock:
            credentials = self.store.get()
            if not credentials or not credentials.get("refresh"):
                return None

            current = credentials.get("access")
            if current and current != stale_access:
                logger.debug("Access token was already refreshed by a concurrent request")
                return current

            try:
                access = self._fetch_access_token(credentials["refresh"])
            except (TokenRefreshException, ApiConnectionException, ResponseDecodeException) as e:
                logger.error(f"Token refresh failed: {e}")
                self.end_session("refresh_failed")
                return None

            self.store.set({"access": access, "refresh": credentials["refresh"]})
            logger.debug("Access token refreshed")
            return access

    def _fetch_access_token(self, refresh_token: str) -> str:
        # The refresh endpoint never sees the expiring access token
        response = HttpClient.request(
            "POST",
            self.refresh_url,
            headers={"Content-Type": "application/json"},
            json={"refresh": refresh_token},
            timeout=self.timeout,
        )

        if not 200 <= response.status_code < 300:
            raise TokenRefreshException(f"Token refresh failed: status={response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseDecodeException(f"Invalid token refresh response: {e}", response.status_code) from e

        access = body.get("access") if isinstance(body, dict) else None
        if not access:
            raise TokenRefreshException("Token refresh response did not contain an access token")
        return access
