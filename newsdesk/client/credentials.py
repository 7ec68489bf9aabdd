"""
Credential storage backends.

The API client never keeps tokens itself; it reads and writes them through a
store implementing the narrow ``CredentialStore`` protocol.
"""

import json
import os
import threading
from typing import Optional, Protocol

from newsdesk.client.api.types import CredentialPair
from newsdesk.logging import logger


class CredentialStore(Protocol):
    """Protocol for credential storage backends"""

    def get(self) -> Optional[CredentialPair]: ...

    def set(self, credentials: CredentialPair) -> None: ...

    def clear(self) -> None: ...


class InMemoryCredentialStore:
    """Keeps the token pair in process memory for the lifetime of the session"""

    def __init__(self, credentials: Optional[CredentialPair] = None):
        self._credentials: Optional[CredentialPair] = dict(credentials) if credentials else None
        self._lock = threading.Lock()

    def get(self) -> Optional[CredentialPair]:
        with self._lock:
            if self._credentials is None:
                return None
            return dict(self._credentials)

    def set(self, credentials: CredentialPair) -> None:
        with self._lock:
            self._credentials = dict(credentials)

    def clear(self) -> None:
        with self._lock:
            self._credentials = None


class FileCredentialStore:
    """
    Persists the token pair as JSON so it survives between processes.

    The file is created with owner-only permissions and removed on ``clear()``.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def get(self) -> Optional[CredentialPair]:
        with self._lock:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                return None
            except (OSError, ValueError) as e:
                logger.warning(f"Ignoring unreadable credentials file {self.path}: {e}")
                return None

        if not isinstance(data, dict) or "access" not in data:
            return None
        return {"access": data.get("access") or "", "refresh": data.get("refresh") or ""}

    def set(self, credentials: CredentialPair) -> None:
        with self._lock:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"access": credentials["access"], "refresh": credentials["refresh"]}, f)

    def clear(self) -> None:
        with self._lock:
            try:
                os.remove(self.path)
            except FileNotFoundError:
                pass
