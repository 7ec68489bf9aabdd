from typing import Any, Optional

from newsdesk.client.api import ApiClient
from newsdesk.client.auth_manager import AuthManager
from newsdesk.client.credentials import CredentialStore, FileCredentialStore, InMemoryCredentialStore
from newsdesk.client.http.http_client import HttpClient
from newsdesk.config import Config
from newsdesk.logging import logger
from newsdesk.session import SessionManager

__all__ = ["Client", "CredentialStore", "FileCredentialStore", "InMemoryCredentialStore"]


class Client:
    """
    Entry point wiring config, credential store, API clients and session together.

    Example:
        client = Client(endpoint="https://news.example.com")
        client.session.login("me@example.com", "secret")
        articles = client.api.news.get_news({"tag": "economy"})
    """

    config: Config
    api: ApiClient
    auth_manager: AuthManager
    session: SessionManager

    def __init__(self, store: Optional[CredentialStore] = None, config: Optional[Config] = None, **kwargs):
        self.config = config or Config()
        self.config.configure(**kwargs)
        self.store = store if store is not None else InMemoryCredentialStore()

        HttpClient.configure(max_retries=self.config.max_retries)
        self.auth_manager = AuthManager(
            self.store,
            refresh_url=f"{self.config.endpoint}{self.config.refresh_path}",
            timeout=self.config.timeout,
        )
        self.api = ApiClient(self.config.endpoint, self.auth_manager, self.config)
        self.session = SessionManager(self.api.auth, self.auth_manager)
        logger.debug(f"Client configured for {self.config.endpoint}")

    def configure(self, **kwargs) -> None:
        """Update client configuration. Stored tokens, the loaded user and session callbacks are kept."""
        self.config.configure(**kwargs)
        HttpClient.configure(max_retries=self.config.max_retries)
        self.auth_manager.refresh_url = f"{self.config.endpoint}{self.config.refresh_path}"
        self.auth_manager.timeout = self.config.timeout
        self.api = ApiClient(self.config.endpoint, self.auth_manager, self.config)
        self.session.auth_api = self.api.auth

    def request(self, path: str, **kwargs) -> Any:
        """Authenticated request against any backend path, see ``BaseApiClient.request``"""
        return self.api.custom.request(path, **kwargs)
