"""
Permission-checked article management.

Unlike the plain news routes these are authorized per user role on the backend.
"""

from typing import Any, List

from newsdesk.client.api.base import BaseApiClient
from newsdesk.client.api.endpoints.news import ArticleId


class ArticleManagementApi(BaseApiClient):
    def delete_article_with_permission(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/delete-with-permission/", method="DELETE")

    def update_global_tags(self, article_id: ArticleId, tags: List[str]) -> Any:
        return self.request(f"/news/{article_id}/update-global-tags/", method="PUT", body={"tags": tags})

    def add_custom_tags_to_article(self, article_id: ArticleId, custom_tags: List[Any]) -> Any:
        return self.request(
            f"/news/{article_id}/add-custom-tags/", method="POST", body={"custom_tags": custom_tags}
        )
