"""
Author domain model.

An Author is an aggregate root identified by ``author_id``. Its ``name`` is
unique among live authors, and that rule needs a repository lookup, so the
name is guarded: the field is frozen and only
:class:`~bookstore.domain.author_manager.AuthorManager` changes it, through
``_set_name``. Descriptive attributes (birth date, short bio) are ordinary
fields that owners may assign directly.

Soft delete is explicit: ``deleted_at`` is set by the repository and deleted
authors are invisible to lookups.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import DomainValidationError


class AuthorConstants:
    """Limits shared by every layer that handles authors."""

    MAX_NAME_LENGTH = 64


def validate_author_name(
    name: Optional[str], max_length: int = AuthorConstants.MAX_NAME_LENGTH
) -> str:
    """Check an author name and return it trimmed.

    Args:
        name: Candidate name
        max_length: Maximum allowed length after trimming

    Returns:
        The trimmed name

    Raises:
        DomainValidationError: If the name is empty, blank or too long
    """
    if name is None or not name.strip():
        raise DomainValidationError("name", "must not be empty")
    name = name.strip()
    if len(name) > max_length:
        raise DomainValidationError(
            "name", f"must be at most {max_length} characters"
        )
    return name


def name_key(name: str, case_sensitive: bool = True) -> str:
    """Comparison key used for name uniqueness."""
    name = name.strip()
    return name if case_sensitive else name.casefold()


class Author(BaseModel):
    """Author aggregate root."""

    model_config = ConfigDict(validate_assignment=True)

    author_id: str = Field(frozen=True)
    name: str = Field(frozen=True)
    birth_date: date
    short_bio: Optional[str] = None

    # Audit timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    deleted_at: Optional[datetime] = None

    @field_validator("author_id")
    @classmethod
    def author_id_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Author ID cannot be empty")
        return v.strip()

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return validate_author_name(v)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def _set_name(
        self, name: str, max_length: int = AuthorConstants.MAX_NAME_LENGTH
    ) -> None:
        # Only AuthorManager calls this, after the uniqueness check.
        self.__dict__["name"] = validate_author_name(name, max_length)
        self.__pydantic_fields_set__.add("name")
