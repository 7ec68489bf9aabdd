from typing import Any

from newsdesk.client.api.base import BaseApiClient


class HomeApi(BaseApiClient):
    """Client for the landing page payload"""

    def get_home_data(self) -> Any:
        return self.request("/")
