"""
API client for the news backend.

This module provides the master client that hands out one resource client per
backend area, all sharing the same endpoint, auth manager and config.
"""

from typing import Dict, Optional, Type, TypeVar, cast

from newsdesk.client.api.base import BaseApiClient
from newsdesk.client.api.endpoints import (
    ArticleManagementApi,
    AuthApi,
    ContextApi,
    HomeApi,
    NewsApi,
    PerspectiveApi,
    UploadApi,
    UserApi,
)
from newsdesk.client.api.types import ApiResponse, CredentialPair, FormData
from newsdesk.client.auth_manager import AuthManager
from newsdesk.config import Config

# Define a type variable for client classes
T = TypeVar("T", bound=BaseApiClient)

__all__ = ["ApiClient", "BaseApiClient", "ApiResponse", "CredentialPair", "FormData"]


class ApiClient:
    """
    Master API client that contains all resource-specific clients.

    Resource clients are created lazily on first access and cached.
    """

    def __init__(self, endpoint: str, auth_manager: Optional[AuthManager] = None, config: Optional[Config] = None):
        """
        Initialize the master API client.

        Args:
            endpoint: The base URL for the API
            auth_manager: Shared credential/refresh manager
            config: Client configuration
        """
        self.endpoint = endpoint
        self.auth_manager = auth_manager
        self.config = config or Config()
        self._clients: Dict[str, BaseApiClient] = {}

    @property
    def auth(self) -> AuthApi:
        return self._get_client("auth", AuthApi)

    @property
    def news(self) -> NewsApi:
        return self._get_client("news", NewsApi)

    @property
    def upload(self) -> UploadApi:
        return self._get_client("upload", UploadApi)

    @property
    def context(self) -> ContextApi:
        return self._get_client("context", ContextApi)

    @property
    def perspective(self) -> PerspectiveApi:
        return self._get_client("perspective", PerspectiveApi)

    @property
    def home(self) -> HomeApi:
        return self._get_client("home", HomeApi)

    @property
    def user(self) -> UserApi:
        return self._get_client("user", UserApi)

    @property
    def articles(self) -> ArticleManagementApi:
        return self._get_client("articles", ArticleManagementApi)

    @property
    def custom(self) -> BaseApiClient:
        """Untyped client for routes without a dedicated wrapper (get/post/put/delete)"""
        return self._get_client("custom", BaseApiClient)

    def _get_client(self, name: str, client_class: Type[T]) -> T:
        """
        Get or create a resource-specific client.

        Args:
            name: Cache key
            client_class: The client class to instantiate

        Returns:
            The resource-specific client
        """
        if name not in self._clients:
            self._clients[name] = client_class(self.endpoint, self.auth_manager, self.config)
        return cast(T, self._clients[name])
