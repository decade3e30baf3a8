"""
Pydantic models for author use case inputs and outputs.

These define the contract between the application layer and its callers.
Single authors are returned as domain models directly; only the paged
listing needs a wrapper.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from bookstore.domain import Author


class CreateAuthorRequest(BaseModel):
    """Request model for creating an author."""

    name: str
    birth_date: date
    short_bio: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UpdateAuthorRequest(CreateAuthorRequest):
    """Request model for updating an author."""


class GetAuthorListRequest(BaseModel):
    """Request model for listing authors page by page."""

    skip_count: int = Field(default=0, ge=0)
    max_result_count: int = Field(default=10, ge=0)
    sorting: Optional[str] = None
    filter: Optional[str] = None


class PagedAuthorList(BaseModel):
    """One page of authors plus the total number matching the filter."""

    total_count: int
    items: List[Author]
