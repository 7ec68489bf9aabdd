"""
Typed views of the backend's JSON payloads.

Every field has a default so a partial or failed response still yields a
well-formed object; ``newsdesk.parsers`` does the tolerant conversion.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    headline: str = ""
    news: str = ""
    details: str = ""
    prelims_point: str = ""
    tags: List[Any] = Field(default_factory=list)
    topics: List[Any] = Field(default_factory=list)
    last_updated: Optional[str] = None
    is_read: bool = False
    is_important: bool = False
    custom_tags: List[Any] = Field(default_factory=list)


class Pagination(BaseModel):
    current_page: int = 1
    total_pages: int = 1
    has_next: bool = False
    has_previous: bool = False
    per_page: int = 12


class NewsListFilters(BaseModel):
    all_topics: List[Any] = Field(default_factory=list)
    applied_filters: Dict[str, Any] = Field(default_factory=dict)


class NewsListPage(BaseModel):
    news_articles: List[Article] = Field(default_factory=list)
    total_articles: int = 0
    pagination: Pagination = Field(default_factory=Pagination)
    filters: NewsListFilters = Field(default_factory=NewsListFilters)


class HomePage(BaseModel):
    news_articles: List[Dict[str, Any]] = Field(default_factory=list)
    total_articles: int = 0


class Navigation(BaseModel):
    previous: Any = None
    next: Any = None
    current_position: int = 1
    total_articles: int = 1


class NewsDetail(BaseModel):
    article: Optional[Article] = None
    navigation: Navigation = Field(default_factory=Navigation)


class ContextItem(BaseModel):
    id: Any = None
    topic: str = ""
    image_url: Any = Field(default_factory=dict)
    content: Any = Field(default_factory=dict)
    tags: List[Any] = Field(default_factory=list)
    upsc_relevance: str = ""
    created_at: datetime


class PerspectiveItem(BaseModel):
    id: Any = None
    topic: str = ""
    content: Any = Field(default_factory=dict)
    summary: str = ""
    tags: List[Any] = Field(default_factory=list)
    upsc_relevance: str = ""
    created_at: datetime


class UploadRecord(BaseModel):
    id: Any = None
    title: str = ""
    filename: str = ""
    uploaded_at: datetime
    processed: bool = False
    task_status: str = "PENDING"
    total_pages: int = 0
    processed_pages: int = 0
    error_message: Optional[str] = None
    processing_started_at: Optional[datetime] = None
    processing_completed_at: Optional[datetime] = None


class UploadStatus(BaseModel):
    id: Any = None
    file_name: str = ""
    total_pages: int = 0
    processed_pages: int = 0
    processed: bool = False
    progress: float = 0
    task_status: str = "PENDING"
    task_id: Optional[str] = None
    error_message: Optional[str] = None
    processing_started_at: Optional[datetime] = None
    processing_completed_at: Optional[datetime] = None


class RelatedArticles(BaseModel):
    related_articles: List[Dict[str, Any]] = Field(default_factory=list)
    count: int = 0


class ToggleResult(BaseModel):
    success: bool = False
    message: str = ""
    is_read: Optional[bool] = None
    is_important: Optional[bool] = None


class TagUpdateResult(BaseModel):
    success: bool = False
    message: str = ""
    tags: List[Any] = Field(default_factory=list)


class UploadResult(BaseModel):
    success: bool = False
    message: str = ""
    upload_id: Any = None
    task_id: Optional[str] = None
    duplicate: bool = False


class GenerationResult(BaseModel):
    success: bool = False
    message: str = ""
    context: Optional[Dict[str, Any]] = None
    perspective: Optional[Dict[str, Any]] = None


class ErrorInfo(BaseModel):
    success: bool = False
    message: str
    status: int
