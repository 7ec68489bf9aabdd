"""
Clients for the AI-generated "context" and "perspective" analyses.

Both kinds share one route layout, only the collection and type differ.
"""

from typing import Any, Union

from newsdesk.client.api.base import BaseApiClient


class AiContentApi(BaseApiClient):
    content_type: str = ""

    def list(self) -> Any:
        return self.request(f"/{self.content_type}/")

    def generate(self, topic: str) -> Any:
        """Ask the backend to generate a new analysis for ``topic``"""
        return self.request(f"/{self.content_type}/", method="POST", body={"topic": topic})

    def get_detail(self, content_id: Union[int, str]) -> Any:
        return self.request(f"/ai-content/{content_id}/", params={"type": self.content_type})


class ContextApi(AiContentApi):
    """Client for context analyses"""

    content_type = "context"

    def get_contexts(self) -> Any:
        return self.list()

    def generate_context(self, topic: str) -> Any:
        return self.generate(topic)

    def get_context_detail(self, content_id: Union[int, str]) -> Any:
        return self.get_detail(content_id)


class PerspectiveApi(AiContentApi):
    """Client for perspective analyses"""

    content_type = "perspective"

    def get_perspectives(self) -> Any:
        return self.list()

    def generate_perspective(self, topic: str) -> Any:
        return self.generate(topic)

    def get_perspective_detail(self, content_id: Union[int, str]) -> Any:
        return self.get_detail(content_id)
