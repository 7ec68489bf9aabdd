"""
News article client.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from newsdesk.client.api.base import BaseApiClient
from newsdesk.client.api.types import FormData

ArticleId = Union[int, str]


class NewsApi(BaseApiClient):
    """Client for the /news/ endpoints"""

    def get_news(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List articles with filtering and pagination.

        Args:
            params: Query parameters, see ``newsdesk.filters.NewsFilters.to_params``
        """
        return self.request("/news/", params=params or None)

    def get_news_detail(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/")

    def toggle_read_status(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/toggle-read/", method="POST")

    def toggle_important_status(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/toggle-important/", method="POST")

    def update_tags(self, article_id: ArticleId, tags: Union[str, List[str]]) -> Any:
        """Replace an article's tags; the backend takes them as one comma-separated form field"""
        if not isinstance(tags, str):
            tags = ",".join(tags)
        form = FormData().append("tags", tags)
        return self.request(f"/news/{article_id}/update-tags/", method="POST", body=form)

    def delete_article(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/delete/", method="POST")

    def bulk_delete_articles(self, article_ids: Iterable[ArticleId]) -> Any:
        """Delete several articles; ids are sent as repeated ``article_ids`` form fields"""
        form = FormData()
        for article_id in article_ids:
            form.append("article_ids", article_id)
        return self.request("/news/bulk-delete/", method="POST", body=form)

    def get_related_articles(self, article_id: ArticleId) -> Any:
        return self.request(f"/news/{article_id}/related/")

    def get_all_tags(self) -> Any:
        return self.request("/api/tags/")
