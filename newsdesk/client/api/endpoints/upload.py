"""
PDF upload client.
"""

import os
from typing import IO, Any, Optional, Union

from newsdesk.client.api.base import BaseApiClient
from newsdesk.client.api.types import FormData


class UploadApi(BaseApiClient):
    """Client for newspaper PDF uploads and their processing status"""

    def upload_pdf(self, file: Union[str, IO[bytes]], filename: Optional[str] = None) -> Any:
        """
        Upload a newspaper PDF for processing.

        Args:
            file: A path or an open binary file
            filename: Name reported to the backend, defaults to the file's base name

        Returns:
            The backend payload (``upload_id``, ``task_id``, ``duplicate``...)
        """
        if isinstance(file, str):
            with open(file, "rb") as f:
                return self.upload_pdf(f, filename or os.path.basename(file))

        if filename is None:
            filename = os.path.basename(getattr(file, "name", "") or "upload.pdf")

        form = FormData().add_file("file", file, filename, "application/pdf")
        return self.request("/upload/process/", method="POST", body=form)

    def get_processing_status(self) -> Any:
        return self.request("/processing-status/")
