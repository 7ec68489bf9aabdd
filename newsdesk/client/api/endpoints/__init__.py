"""
Endpoint clients package.

One client per backend resource, all built on BaseApiClient.
"""

from newsdesk.client.api.endpoints.articles import ArticleManagementApi
from newsdesk.client.api.endpoints.auth import AuthApi
from newsdesk.client.api.endpoints.content import ContextApi, PerspectiveApi
from newsdesk.client.api.endpoints.home import HomeApi
from newsdesk.client.api.endpoints.news import NewsApi
from newsdesk.client.api.endpoints.upload import UploadApi
from newsdesk.client.api.endpoints.user import UserApi

__all__ = [
    "ArticleManagementApi",
    "AuthApi",
    "ContextApi",
    "PerspectiveApi",
    "HomeApi",
    "NewsApi",
    "UploadApi",
    "UserApi",
]
