from typing import Any, Optional


class ApiServerException(Exception):
    """The backend answered with a non-success status."""

    def __init__(self, message, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class ApiConnectionException(Exception):
    """The request never produced a response (DNS, refused connection, timeout...)."""

    def __init__(self, message):
        super().__init__(message)


class ResponseDecodeException(Exception):
    """A response declared JSON but its body could not be decoded."""

    def __init__(self, message, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TokenRefreshException(Exception):
    def __init__(self, message="Token refresh failed"):
        super().__init__(message)


class NoCredentialsException(Exception):
    def __init__(self, message="No credentials stored - log in first"):
        super().__init__(message)
