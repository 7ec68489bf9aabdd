"""
Common types used across API client modules.

This module contains type definitions used by multiple API client modules.
"""

from typing import IO, Any, List, Optional, Tuple, TypedDict, Union

from pydantic import BaseModel


class CredentialPair(TypedDict):
    """Access/refresh token pair issued by the identity provider"""

    access: str
    refresh: str


class RefreshTokenResponse(TypedDict):
    """Response from the auth/token/refresh endpoint"""

    access: str


class ApiResponse(BaseModel):
    """Normalized result of a single HTTP exchange"""

    parsed_body: Any = None
    status: int
    ok: bool


FileField = Tuple[str, Union[IO[bytes], bytes], Optional[str]]


class FormData:
    """
    Opaque form payload, sent as multipart (or urlencoded when no files are attached).

    Fields may repeat, which is how the backend receives identifier lists.
    The client never sets a Content-Type for a FormData body so the transport
    can choose the multipart boundary itself.
    """

    def __init__(self):
        self.fields: List[Tuple[str, str]] = []
        self.files: List[Tuple[str, FileField]] = []
        self._offsets: List[Optional[int]] = []

    def append(self, name: str, value: Any) -> "FormData":
        self.fields.append((name, str(value)))
        return self

    def add_file(
        self,
        name: str,
        content: Union[IO[bytes], bytes],
        filename: str,
        content_type: Optional[str] = None,
    ) -> "FormData":
        self.files.append((name, (filename, content, content_type)))
        self._offsets.append(content.tell() if hasattr(content, "tell") else None)
        return self

    def rewind(self) -> None:
        """Seek file objects back to where they were attached so the form can be sent again"""
        for (_, (_, content, _)), offset in zip(self.files, self._offsets):
            if offset is not None:
                content.seek(offset)

    def __repr__(self):
        return f"FormData(fields={self.fields!r}, files={[name for name, _ in self.files]!r})"
