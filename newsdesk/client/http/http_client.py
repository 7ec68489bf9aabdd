import threading
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from newsdesk.client.http.http_adapter import BaseHTTPAdapter, connection_retry
from newsdesk.exceptions import ApiConnectionException
from newsdesk.helpers.version import get_newsdesk_version
from newsdesk.logging import logger


class HttpClient:
    """Process-wide pooled ``requests`` session shared by every API client"""

    _session: Optional[requests.Session] = None
    _session_lock = threading.Lock()
    _max_retries: int = 0

    @classmethod
    def configure(cls, max_retries: int = 0) -> None:
        """
        Set the transport retry budget.

        A live session keeps its cookie jar (and with it the CSRF cookie); only its
        adapters are swapped.
        """
        with cls._session_lock:
            if max_retries == cls._max_retries:
                return
            cls._max_retries = max_retries
            if cls._session is not None:
                cls._mount_adapter(cls._session)

    @classmethod
    def _mount_adapter(cls, session: requests.Session) -> None:
        old_adapter = session.adapters.get("https://")
        adapter = BaseHTTPAdapter(max_retries=connection_retry(cls._max_retries))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        if old_adapter is not None:
            old_adapter.close()

    @classmethod
    def get_session(cls) -> requests.Session:
        """Get or create the global session with connection pooling"""
        if cls._session is None:
            with cls._session_lock:
                if cls._session is None:  # Double-check locking
                    session = requests.Session()
                    cls._mount_adapter(session)

                    # No default Content-Type: multipart bodies need the transport to pick one
                    session.headers.update(
                        {
                            "Connection": "keep-alive",
                            "Accept": "*/*",
                            "User-Agent": f"newsdesk-python/{get_newsdesk_version() or 'unknown'}",
                        }
                    )
                    cls._session = session
        return cls._session

    @classmethod
    def close(cls) -> None:
        """Close and forget the global session"""
        with cls._session_lock:
            if cls._session is not None:
                cls._session.close()
                cls._session = None

    @classmethod
    def get_cookie(cls, name: str) -> Optional[str]:
        """Read a cookie the backend has set on the shared session"""
        return cls.get_session().cookies.get(name)

    @classmethod
    def request(
        cls,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Optional[Union[List[Tuple[str, str]], str, bytes]] = None,
        files: Optional[List[Tuple[str, Any]]] = None,
        timeout: int = 30,
    ) -> requests.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (e.g., 'GET', 'POST')
            url: Full URL for the request
            headers: Request headers
            params: Query string parameters
            json: Structured payload, JSON-encoded by requests
            data: Form fields or raw body
            files: Files for a multipart body
            timeout: Request timeout in seconds

        Returns:
            The raw response, whatever its status

        Raises:
            ApiConnectionException: If no response was received
        """
        session = cls.get_session()
        logger.debug(f"{method.upper()} {url}")
        try:
            response = session.request(
                method.upper(),
                url,
                headers=headers,
                params=params,
                json=json,
                data=data,
                files=files,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as e:
            raise ApiConnectionException(f"Could not reach API server - connection timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ApiConnectionException(f"RequestException: {e}") from e

        logger.debug(f"{method.upper()} {url} -> {response.status_code}")
        return response
