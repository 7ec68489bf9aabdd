from typing import Optional

from requests.adapters import HTTPAdapter
from urllib3.util import Retry


def connection_retry(total: int) -> Retry:
    """
    Retry policy that only covers connection errors.

    Requests that reached the server (read errors, error statuses) are never
    replayed at this layer; status handling belongs to the API client.
    """
    return Retry(
        total=total,
        connect=total,
        read=0,
        status=0,
        backoff_factor=0.1,
        raise_on_status=False,
    )


class BaseHTTPAdapter(HTTPAdapter):
    """Base HTTP adapter with connection pooling and connection-only retries"""

    def __init__(
        self,
        pool_connections: int = 15,
        pool_maxsize: int = 64,
        max_retries: Optional[Retry] = None,
    ):
        """
        Initialize the base HTTP adapter.

        Args:
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum number of connections to save in the pool
            max_retries: Retry configuration for failed connections
        """
        if max_retries is None:
            max_retries = connection_retry(0)

        super().__init__(pool_connections=pool_connections, pool_maxsize=pool_maxsize, max_retries=max_retries)
