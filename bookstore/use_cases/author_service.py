"""
Application service for managing authors.

This module contains the use case class that callers outside the domain
use to read and change authors. It orchestrates AuthorManager and the
AuthorRepository and remains framework-agnostic: dependencies are injected
through the constructor and validated against their protocols.
"""

import logging
from typing import Optional

from bookstore.domain import Author, AuthorNotFoundError
from bookstore.domain.author_manager import AuthorManager
from bookstore.repositories import AuthorRepository
from bookstore.validation import ensure_repository_protocol

from .requests import (
    CreateAuthorRequest,
    GetAuthorListRequest,
    PagedAuthorList,
    UpdateAuthorRequest,
)

logger = logging.getLogger(__name__)


class AuthorService:
    """
    Use case for creating, reading, updating and deleting authors.

    Name changes always go through AuthorManager so that every name is
    checked for uniqueness; the repository's save enforces the same rule
    again for writes that race each other. Descriptive attributes are set
    directly.
    """

    def __init__(
        self,
        author_repo: AuthorRepository,
        author_manager: AuthorManager,
        default_sorting: str = "name",
        max_page_size: int = 1000,
    ) -> None:
        """Initialize author service.

        Args:
            author_repo: Repository for author persistence
            author_manager: Domain service guarding author names
            default_sorting: Sorting used when a list request has none
            max_page_size: Upper bound applied to max_result_count
        """
        self.author_repo = ensure_repository_protocol(
            author_repo, AuthorRepository  # type: ignore[type-abstract]
        )
        self.author_manager = author_manager
        self.default_sorting = default_sorting
        self.max_page_size = max_page_size

    async def get_author(self, author_id: str) -> Author:
        """Return a live author.

        Raises:
            AuthorNotFoundError: If the author does not exist or is deleted
        """
        author = await self.author_repo.get(author_id)
        if author is None:
            raise AuthorNotFoundError(author_id)
        return author

    async def list_authors(
        self, request: Optional[GetAuthorListRequest] = None
    ) -> PagedAuthorList:
        """Return one page of authors and the total matching the filter."""
        request = request or GetAuthorListRequest()
        sorting = request.sorting or self.default_sorting
        max_result_count = min(request.max_result_count, self.max_page_size)

        total_count = await self.author_repo.count(filter=request.filter)
        items = await self.author_repo.list(
            skip_count=request.skip_count,
            max_result_count=max_result_count,
            sorting=sorting,
            filter=request.filter,
        )

        logger.debug(
            "Authors listed",
            extra={
                "total_count": total_count,
                "returned": len(items),
                "sorting": sorting,
                "filter": request.filter,
            },
        )
        return PagedAuthorList(total_count=total_count, items=items)

    async def create_author(self, request: CreateAuthorRequest) -> Author:
        """Create and persist a new author.

        Raises:
            DomainValidationError: If the name is invalid
            AuthorAlreadyExistsError: If the name is taken
        """
        logger.debug(
            "Creating author", extra={"author_name": request.name}
        )

        author = await self.author_manager.create(
            name=request.name,
            birth_date=request.birth_date,
            short_bio=request.short_bio,
        )

        try:
            await self.author_repo.save(author)
        except Exception as e:
            logger.error(
                "Failed to save new author",
                exc_info=True,
                extra={
                    "author_id": author.author_id,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise

        return author

    async def update_author(
        self, author_id: str, request: UpdateAuthorRequest
    ) -> Author:
        """Update an author's name and descriptive attributes.

        Raises:
            AuthorNotFoundError: If the author does not exist or is deleted
            DomainValidationError: If the new name is invalid
            AuthorAlreadyExistsError: If the new name is taken
        """
        author = await self.get_author(author_id)

        if author.name != request.name:
            await self.author_manager.rename(author, request.name)

        author.birth_date = request.birth_date
        author.short_bio = request.short_bio

        await self.author_repo.save(author)

        logger.info(
            "Author updated",
            extra={"author_id": author_id, "author_name": author.name},
        )
        return author

    async def delete_author(self, author_id: str) -> None:
        """Soft delete an author. Deleting twice is harmless."""
        await self.author_repo.delete(author_id)
        logger.info("Author deleted", extra={"author_id": author_id})
