import threading
from typing import Optional

from newsdesk.client import Client, CredentialStore, FileCredentialStore, InMemoryCredentialStore
from newsdesk.client.api.types import ApiResponse, CredentialPair, FormData
from newsdesk.config import Config
from newsdesk.exceptions import (
    ApiConnectionException,
    ApiServerException,
    NoCredentialsException,
    ResponseDecodeException,
    TokenRefreshException,
)
from newsdesk.filters import NewsFilters
from newsdesk.logging import configure_logging, logger

# Thread-safe client management
_client_lock = threading.Lock()
_client: Optional[Client] = None


def get_client() -> Client:
    """Get the shared client instance in a thread-safe manner"""
    global _client

    # Double-checked locking pattern for thread safety
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = Client()

    return _client


def init(store: Optional[CredentialStore] = None, **kwargs) -> Client:
    """
    Create the shared client and configure logging.

    Args:
        store: Credential store; in-memory by default
        **kwargs: Config overrides, see ``newsdesk.config.Config.configure``
    """
    global _client

    with _client_lock:
        _client = Client(store=store, **kwargs)
    configure_logging(_client.config)
    return _client


__all__ = [
    "init",
    "get_client",
    "Client",
    "Config",
    "CredentialStore",
    "CredentialPair",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "ApiResponse",
    "FormData",
    "NewsFilters",
    "ApiServerException",
    "ApiConnectionException",
    "ResponseDecodeException",
    "TokenRefreshException",
    "NoCredentialsException",
    "configure_logging",
    "logger",
]
