import json
import os
from dataclasses import dataclass, field
from typing import Optional, TypedDict, Union

from newsdesk.helpers.env import get_env_int, get_env_str


class ConfigDict(TypedDict):
    endpoint: Optional[str]
    timeout: Optional[int]
    max_retries: Optional[int]
    log_level: Optional[Union[str, int]]
    log_file: Optional[str]
    csrf_cookie_name: Optional[str]
    csrf_header_name: Optional[str]
    refresh_path: Optional[str]
    credentials_file: Optional[str]


@dataclass
class Config:
    endpoint: str = field(
        default_factory=lambda: get_env_str("NEWSDESK_API_URL", "http://localhost:8000"),
        metadata={"description": "Base URL for the news backend"},
    )

    timeout: int = field(
        default_factory=lambda: get_env_int("NEWSDESK_TIMEOUT", 30),
        metadata={"description": "Seconds to wait for a response before giving up"},
    )

    max_retries: int = field(
        default_factory=lambda: get_env_int("NEWSDESK_MAX_RETRIES", 0),
        metadata={"description": "Transport-level retries for failed connections (0 disables them)"},
    )

    log_level: Union[str, int] = field(
        default_factory=lambda: get_env_str("NEWSDESK_LOG_LEVEL", "WARNING"),
        metadata={"description": "Logging level for Newsdesk logs"},
    )

    log_file: Optional[str] = field(
        default_factory=lambda: get_env_str("NEWSDESK_LOG_FILE"),
        metadata={"description": "Optional file to mirror log output into"},
    )

    csrf_cookie_name: str = field(
        default_factory=lambda: get_env_str("NEWSDESK_CSRF_COOKIE", "csrftoken"),
        metadata={"description": "Cookie holding the anti-forgery token"},
    )

    csrf_header_name: str = field(
        default_factory=lambda: get_env_str("NEWSDESK_CSRF_HEADER", "X-CSRF-Token"),
        metadata={"description": "Header echoing the anti-forgery token back to the backend"},
    )

    refresh_path: str = field(
        default_factory=lambda: get_env_str("NEWSDESK_REFRESH_PATH", "/auth/token/refresh/"),
        metadata={"description": "Path of the token refresh endpoint"},
    )

    credentials_file: str = field(
        default_factory=lambda: get_env_str(
            "NEWSDESK_CREDENTIALS_FILE", os.path.join(os.path.expanduser("~"), ".newsdesk", "credentials.json")
        ),
        metadata={"description": "Where the CLI keeps the token pair between runs"},
    )

    def __post_init__(self):
        self.endpoint = self.endpoint.rstrip("/")

    def configure(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        log_level: Optional[Union[str, int]] = None,
        log_file: Optional[str] = None,
        csrf_cookie_name: Optional[str] = None,
        csrf_header_name: Optional[str] = None,
        refresh_path: Optional[str] = None,
        credentials_file: Optional[str] = None,
    ):
        """Configure settings from kwargs, validating where necessary"""
        if endpoint is not None:
            self.endpoint = endpoint.rstrip("/")

        if timeout is not None:
            if timeout <= 0:
                raise ValueError(f"timeout must be positive, got {timeout}")
            self.timeout = timeout

        if max_retries is not None:
            if max_retries < 0:
                raise ValueError(f"max_retries can't be negative, got {max_retries}")
            self.max_retries = max_retries

        if log_level is not None:
            self.log_level = log_level

        if log_file is not None:
            self.log_file = log_file

        if csrf_cookie_name is not None:
            self.csrf_cookie_name = csrf_cookie_name

        if csrf_header_name is not None:
            self.csrf_header_name = csrf_header_name

        if refresh_path is not None:
            self.refresh_path = refresh_path

        if credentials_file is not None:
            self.credentials_file = credentials_file

    def dict(self) -> ConfigDict:
        """Return a dictionary representation of the config"""
        return {
            "endpoint": self.endpoint,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "csrf_cookie_name": self.csrf_cookie_name,
            "csrf_header_name": self.csrf_header_name,
            "refresh_path": self.refresh_path,
            "credentials_file": self.credentials_file,
        }

    def json(self):
        """Return a JSON representation of the config"""
        return json.dumps(self.dict())
