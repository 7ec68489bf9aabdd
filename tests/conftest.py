import time

import jwt
import pytest
import requests_mock

from newsdesk.client.api import ApiClient
from newsdesk.client.auth_manager import AuthManager
from newsdesk.client.credentials import InMemoryCredentialStore
from newsdesk.client.http.http_client import HttpClient
from newsdesk.config import Config

JSON_HEADERS = {"Content-Type": "application/json"}


def make_jwt(exp_offset: int = 3600, **claims) -> str:
    """Build an HS256 token expiring ``exp_offset`` seconds from now"""
    payload = {"user_id": 1, "exp": int(time.time()) + exp_offset, **claims}
    return jwt.encode(payload, "newsdesk-test-signing-key-0123456789", algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_http_session():
    """Every test starts with a fresh shared session (and an empty cookie jar)"""
    HttpClient.close()
    yield
    HttpClient.close()


@pytest.fixture
def endpoint() -> str:
    """Base API URL"""
    return "https://news.example.com"


@pytest.fixture
def config(endpoint) -> Config:
    config = Config()
    config.configure(endpoint=endpoint, timeout=5, refresh_path="/auth/token/refresh/")
    return config


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore({"access": "access-1", "refresh": "refresh-1"})


@pytest.fixture
def auth_manager(store, config) -> AuthManager:
    return AuthManager(store, refresh_url=f"{config.endpoint}{config.refresh_path}", timeout=config.timeout)


@pytest.fixture
def api(endpoint, auth_manager, config) -> ApiClient:
    return ApiClient(endpoint, auth_manager, config)


@pytest.fixture
def mock_req():
    """Mocks the news backend. Unregistered URLs raise NoMockAddress."""
    with requests_mock.Mocker(real_http=False) as m:
        yield m


@pytest.fixture
def jwt_factory():
    return make_jwt
