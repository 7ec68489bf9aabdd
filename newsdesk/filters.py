"""
News list filters and their query-string form.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlencode

DEFAULT_PER_PAGE = 6

READ_STATUSES = ("read", "unread")


@dataclass
class NewsFilters:
    """
    Filters for ``NewsApi.get_news``.

    Empty values are left out of the query, and so is ``per_page`` while it has
    its default, which keeps shareable URLs short.
    """

    search: str = ""
    tag: str = ""
    topic: str = ""
    date_from: str = ""
    date_to: str = ""
    read_status: str = ""
    per_page: int = DEFAULT_PER_PAGE
    page: Optional[int] = None

    def __post_init__(self):
        if self.read_status and self.read_status not in READ_STATUSES:
            raise ValueError(f"read_status must be one of {READ_STATUSES}, got {self.read_status!r}")
        if self.per_page <= 0:
            raise ValueError(f"per_page must be positive, got {self.per_page}")

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        for name in ("search", "tag", "topic", "date_from", "date_to", "read_status"):
            value = getattr(self, name)
            if value:
                params[name] = value
        if self.per_page != DEFAULT_PER_PAGE:
            params["per_page"] = self.per_page
        if self.page and self.page > 1:
            params["page"] = self.page
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_params())

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "NewsFilters":
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {k: v for k, v in params.items() if k in known and v not in (None, "")}

        # Unparseable numbers fall back to the defaults
        for name, default in (("per_page", DEFAULT_PER_PAGE), ("page", None)):
            if name in values:
                try:
                    values[name] = int(values[name])
                except (TypeError, ValueError):
                    values[name] = default
        if values.get("per_page") is not None and values["per_page"] <= 0:
            values["per_page"] = DEFAULT_PER_PAGE
        if values.get("read_status") not in (None,) + READ_STATUSES:
            values.pop("read_status")

        return cls(**values)

    @classmethod
    def from_query_string(cls, query: str) -> "NewsFilters":
        return cls.from_params(dict(parse_qsl(query.lstrip("?"))))

    def with_page(self, page: int) -> "NewsFilters":
        return NewsFilters(**{**{f.name: getattr(self, f.name) for f in fields(self)}, "page": page})
