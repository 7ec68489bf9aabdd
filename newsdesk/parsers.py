"""
Tolerant conversion of decoded API bodies into ``newsdesk.models``.

The backend wraps most payloads as ``{"success": true, ...}``. When the flag is
missing or false, or a field is missing, null or of the wrong shape, the parsers
fall back to defaults instead of raising, so callers can render whatever they got.
Every field is coerced to its model type here, so building a model never fails
validation.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from newsdesk.exceptions import ApiServerException
from newsdesk.helpers.time import format_date, parse_datetime
from newsdesk.models import (
    Article,
    ContextItem,
    ErrorInfo,
    GenerationResult,
    HomePage,
    Navigation,
    NewsDetail,
    NewsListFilters,
    NewsListPage,
    Pagination,
    PerspectiveItem,
    RelatedArticles,
    TagUpdateResult,
    ToggleResult,
    UploadRecord,
    UploadResult,
    UploadStatus,
)

NO_RESPONSE = "No response received"


def _succeeded(body: Any) -> bool:
    return isinstance(body, dict) and bool(body.get("success"))


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _dicts(value: Any) -> List[Dict[str, Any]]:
    return [item for item in _list(value) if isinstance(item, dict)]


def _int(value: Any, default: int) -> int:
    # Falsy values (None, "", 0) take the default, like the backend's own clients do
    if not value:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float(value: Any, default: float = 0) -> float:
    if not value:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _str(value: Any, default: str = "") -> str:
    if not value:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return default


def _optional_str(value: Any) -> Optional[str]:
    return _str(value) or None


def _optional_bool(value: Any) -> Optional[bool]:
    return None if value is None else bool(value)


def _optional_dict(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) and value else None


def _timestamp(value: Any, default_now: bool = False) -> Optional[datetime]:
    parsed = parse_datetime(value) if isinstance(value, (str, datetime)) else None
    if parsed is None and default_now:
        return datetime.now(timezone.utc)
    return parsed


def _article(raw: Dict[str, Any]) -> Article:
    data = dict(raw)
    for key in ("headline", "news", "details", "prelims_point"):
        data[key] = _str(raw.get(key))
    for key in ("tags", "topics", "custom_tags"):
        data[key] = _list(raw.get(key))
    data["is_read"] = bool(raw.get("is_read"))
    data["is_important"] = bool(raw.get("is_important"))
    data["last_updated"] = _optional_str(raw.get("last_updated"))
    return Article(**data)


def parse_home_page_data(body: Any) -> HomePage:
    if not _succeeded(body):
        return HomePage()
    return HomePage(
        news_articles=_dicts(body.get("news_articles")),
        total_articles=_int(body.get("total_articles"), 0),
    )


def parse_news_list_data(body: Any) -> NewsListPage:
    if not _succeeded(body):
        return NewsListPage()

    pagination = _dict(body.get("pagination"))
    filters = _dict(body.get("filters"))
    return NewsListPage(
        news_articles=[_article(a) for a in _dicts(body.get("articles"))],
        total_articles=_int(pagination.get("total_articles"), 0),
        pagination=Pagination(
            current_page=_int(pagination.get("current_page"), 1),
            total_pages=_int(pagination.get("total_pages"), 1),
            has_next=bool(pagination.get("has_next")),
            has_previous=bool(pagination.get("has_previous")),
            per_page=_int(pagination.get("per_page"), 12),
        ),
        filters=NewsListFilters(
            all_topics=_list(filters.get("all_topics")),
            applied_filters=_dict(filters.get("applied_filters")),
        ),
    )


def parse_news_detail_data(body: Any) -> NewsDetail:
    if not _succeeded(body) or not isinstance(body.get("article"), dict):
        return NewsDetail()

    raw = body["article"]
    navigation = _dict(raw.get("navigation"))
    article = _article({k: v for k, v in raw.items() if k != "navigation"})
    if article.last_updated is None:
        article.last_updated = datetime.now(timezone.utc).isoformat()

    return NewsDetail(
        article=article,
        navigation=Navigation(
            previous=navigation.get("previous") or None,
            next=navigation.get("next") or None,
            current_position=_int(navigation.get("current_position"), 1),
            total_articles=_int(navigation.get("total_articles"), 1),
        ),
    )


def parse_context_data(body: Any) -> List[ContextItem]:
    if not _succeeded(body):
        return []
    return [
        ContextItem(
            id=c.get("id"),
            topic=_str(c.get("topic")),
            image_url=c.get("image_url") or {},
            content=c.get("content") or {},
            tags=_list(c.get("tags")),
            upsc_relevance=_str(c.get("upsc_relevance")),
            created_at=_timestamp(c.get("created_at"), default_now=True),
        )
        for c in _dicts(body.get("contexts"))
    ]


def parse_perspective_data(body: Any) -> List[PerspectiveItem]:
    if not _succeeded(body):
        return []
    return [
        PerspectiveItem(
            id=p.get("id"),
            topic=_str(p.get("topic")),
            content=p.get("content") or {},
            summary=_str(p.get("summary")),
            tags=_list(p.get("tags")),
            upsc_relevance=_str(p.get("upsc_relevance")),
            created_at=_timestamp(p.get("created_at"), default_now=True),
        )
        for p in _dicts(body.get("perspectives"))
    ]


def parse_upload_page_data(body: Any) -> List[UploadRecord]:
    if not _succeeded(body):
        return []
    return [
        UploadRecord(
            id=u.get("id"),
            title=_str(u.get("title")),
            filename=_str(u.get("filename")),
            uploaded_at=_timestamp(u.get("uploaded_at"), default_now=True),
            processed=bool(u.get("processed")),
            task_status=_str(u.get("task_status"), "PENDING"),
            total_pages=_int(u.get("total_pages"), 0),
            processed_pages=_int(u.get("processed_pages"), 0),
            error_message=_optional_str(u.get("error_message")),
            processing_started_at=_timestamp(u.get("processing_started_at")),
            processing_completed_at=_timestamp(u.get("processing_completed_at")),
        )
        for u in _dicts(body.get("recent_uploads"))
    ]


def parse_upload_status(body: Any) -> List[UploadStatus]:
    """Parse the processing-status payload. It carries no success flag, only ``uploads``."""
    if not isinstance(body, dict):
        return []
    return [
        UploadStatus(
            id=u.get("id"),
            file_name=_str(u.get("filename")),
            total_pages=_int(u.get("total_pages"), 0),
            processed_pages=_int(u.get("processed_pages"), 0),
            processed=bool(u.get("processed")),
            progress=_float(u.get("progress")),
            task_status=_str(u.get("task_status"), "PENDING"),
            task_id=_optional_str(u.get("task_id")),
            error_message=_optional_str(u.get("error_message")),
            processing_started_at=_timestamp(u.get("processing_started_at")),
            processing_completed_at=_timestamp(u.get("processing_completed_at")),
        )
        for u in _dicts(body.get("uploads"))
    ]


def parse_tags_data(body: Any) -> List[Any]:
    if not isinstance(body, dict):
        return []
    return _list(body.get("tags"))


def parse_related_articles(body: Any) -> RelatedArticles:
    if not _succeeded(body):
        return RelatedArticles()
    return RelatedArticles(
        related_articles=_dicts(body.get("related_articles")),
        count=_int(body.get("count"), 0),
    )


def parse_toggle_response(body: Any) -> ToggleResult:
    if not isinstance(body, dict):
        return ToggleResult(message=NO_RESPONSE)
    return ToggleResult(
        success=bool(body.get("success")),
        message=_str(body.get("message")),
        is_read=_optional_bool(body.get("is_read")),
        is_important=_optional_bool(body.get("is_important")),
    )


def parse_tag_update_response(body: Any) -> TagUpdateResult:
    if not isinstance(body, dict):
        return TagUpdateResult(message=NO_RESPONSE)
    return TagUpdateResult(
        success=bool(body.get("success")),
        message=_str(body.get("message")),
        tags=_list(body.get("tags")),
    )


def parse_upload_response(body: Any) -> UploadResult:
    if not isinstance(body, dict):
        return UploadResult(message=NO_RESPONSE)
    return UploadResult(
        success=bool(body.get("success")),
        message=_str(body.get("message")),
        upload_id=body.get("upload_id") or None,
        task_id=_optional_str(body.get("task_id")),
        duplicate=bool(body.get("duplicate")),
    )


def parse_generation_response(body: Any) -> GenerationResult:
    if not isinstance(body, dict):
        return GenerationResult(message=NO_RESPONSE)
    return GenerationResult(
        success=bool(body.get("success")),
        message=_str(body.get("message")),
        context=_optional_dict(body.get("context")),
        perspective=_optional_dict(body.get("perspective")),
    )


def parse_error(error: Exception) -> ErrorInfo:
    """Normalize a raised client error for display; status 0 means the server was never reached"""
    if isinstance(error, ApiServerException):
        return ErrorInfo(message=error.message or "An error occurred", status=error.status_code or 500)
    return ErrorInfo(message=str(error) or "Network error occurred", status=0)


def format_tags(tags: Any) -> str:
    if not isinstance(tags, list):
        return ""
    return ", ".join(str(tag) for tag in tags)


format_topics = format_tags


def format_article_for_display(article: Union[Article, Dict[str, Any], None]) -> Optional[Dict[str, Any]]:
    """Add formatted date, joined tags/topics and short excerpts to an article"""
    if not article:
        return None

    data = article.model_dump() if isinstance(article, BaseModel) else dict(article)
    details = data.get("details") or ""
    news = data.get("news") or ""
    return {
        **data,
        "formatted_date": format_date(data.get("last_updated")),
        "formatted_tags": format_tags(data.get("tags")),
        "formatted_topics": format_topics(data.get("topics")),
        "excerpt": details[:200] + "..." if details else "",
        "news_excerpt": news[:150] + "..." if news else "",
    }
