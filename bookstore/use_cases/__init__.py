"""
Use cases for the bookstore application layer.
"""

from .author_service import AuthorService
from .requests import (
    CreateAuthorRequest,
    GetAuthorListRequest,
    PagedAuthorList,
    UpdateAuthorRequest,
)

__all__ = [
    "AuthorService",
    "CreateAuthorRequest",
    "GetAuthorListRequest",
    "PagedAuthorList",
    "UpdateAuthorRequest",
]
