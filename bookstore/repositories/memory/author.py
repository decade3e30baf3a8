"""
Memory implementation of AuthorRepository.

This module provides an in-memory implementation of the AuthorRepository
protocol. Authors are stored as private copies in a dictionary keyed by
author_id, so callers only change stored state through ``save``.

``save`` enforces name uniqueness among live authors under an asyncio lock,
playing the part of a unique index. All operations are async to keep
interface compatibility with storage-backed implementations.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bookstore.domain.author import Author, name_key
from bookstore.domain.exceptions import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
)
from bookstore.repositories.author import AuthorRepository

from .base import MemoryRepositoryMixin, paginate, parse_sorting

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("name", "birth_date", "created_at")


class MemoryAuthorRepository(AuthorRepository, MemoryRepositoryMixin[Author]):
    """
    Memory implementation of AuthorRepository using Python dictionaries.

    Name comparison follows ``case_sensitive_names``: exact after trimming
    by default, casefolded otherwise.
    """

    def __init__(
        self, case_sensitive_names: bool = True, default_sorting: str = "name"
    ) -> None:
        """Initialize repository with empty in-memory storage.

        Args:
            case_sensitive_names: Whether name uniqueness is case-sensitive
            default_sorting: Sorting used when ``list`` is given none
        """
        self.logger = logger
        self.entity_name = "Author"
        self.id_field = "author_id"
        self.storage_dict: Dict[str, Author] = {}
        self.case_sensitive_names = case_sensitive_names
        self.default_sorting = default_sorting
        self._lock = asyncio.Lock()

        parse_sorting(default_sorting, SORTABLE_FIELDS, "name")
        logger.debug(
            "Initializing MemoryAuthorRepository",
            extra={"case_sensitive_names": case_sensitive_names},
        )

    def _holder_of(self, name: str) -> Optional[Author]:
        key = name_key(name, self.case_sensitive_names)
        for author in self.live_entities():
            if name_key(author.name, self.case_sensitive_names) == key:
                return author
        return None

    def _matching(self, filter: Optional[str]) -> List[Author]:
        if not filter:
            return self.live_entities()
        needle = filter.strip().casefold()
        return self.live_entities(lambda a: needle in a.name.casefold())

    async def get(self, author_id: str) -> Optional[Author]:
        """Retrieve a live author by ID.

        Args:
            author_id: Unique author identifier

        Returns:
            Author if found and not deleted, None otherwise
        """
        return self.get_entity(author_id)

    async def find_by_name(self, name: str) -> Optional[Author]:
        """Find the live author holding a name."""
        author = self._holder_of(name)
        if author is None:
            logger.debug(
                "MemoryAuthorRepository: No author with name",
                extra={"author_name": name},
            )
            return None
        return author.model_copy(deep=True)

    async def list(
        self,
        skip_count: int,
        max_result_count: int,
        sorting: Optional[str] = None,
        filter: Optional[str] = None,
    ) -> List[Author]:
        """Return one page of live authors, sorted and filtered."""
        field, descending = parse_sorting(
            sorting, SORTABLE_FIELDS, self.default_sorting
        )
        authors = sorted(
            self._matching(filter),
            key=lambda a: (getattr(a, field), a.author_id),
            reverse=descending,
        )
        page = paginate(authors, skip_count, max_result_count)

        logger.debug(
            "MemoryAuthorRepository: Listed authors",
            extra={
                "skip_count": skip_count,
                "max_result_count": max_result_count,
                "sorting": f"{field} {'desc' if descending else 'asc'}",
                "filter": filter,
                "returned": len(page),
            },
        )
        return [author.model_copy(deep=True) for author in page]

    async def count(self, filter: Optional[str] = None) -> int:
        return len(self._matching(filter))

    async def save(self, author: Author) -> None:
        """Insert or update an author.

        Deletion state is owned by storage: a stored live author stays live
        whatever ``deleted_at`` the caller's copy carries.

        Raises:
            AuthorNotFoundError: If the stored author is soft deleted
            AuthorAlreadyExistsError: If another live author has the name
        """
        async with self._lock:
            stored = self.storage_dict.get(author.author_id)
            if stored is not None:
                if stored.deleted_at is not None:
                    logger.warning(
                        "MemoryAuthorRepository: Refusing to save deleted "
                        "author, use restore",
                        extra={"author_id": author.author_id},
                    )
                    raise AuthorNotFoundError(author.author_id)
                author.deleted_at = stored.deleted_at

            holder = self._holder_of(author.name)
            if holder is not None and holder.author_id != author.author_id:
                logger.warning(
                    "MemoryAuthorRepository: Unique name constraint violated",
                    extra={
                        "author_id": author.author_id,
                        "author_name": author.name,
                        "existing_author_id": holder.author_id,
                    },
                )
                raise AuthorAlreadyExistsError(author.name)
            self.save_entity(author)

    async def delete(self, author_id: str) -> None:
        async with self._lock:
            self.soft_delete_entity(author_id)

    async def restore(self, author_id: str) -> Author:
        """Undo a soft delete, re-checking the name constraint."""
        async with self._lock:
            author = self.storage_dict.get(author_id)
            if author is None:
                raise AuthorNotFoundError(author_id)
            if author.deleted_at is None:
                return author.model_copy(deep=True)

            holder = self._holder_of(author.name)
            if holder is not None:
                logger.warning(
                    "MemoryAuthorRepository: Cannot restore, name taken",
                    extra={
                        "author_id": author_id,
                        "author_name": author.name,
                        "existing_author_id": holder.author_id,
                    },
                )
                raise AuthorAlreadyExistsError(author.name)

            author.deleted_at = None
            author.updated_at = datetime.now(timezone.utc)
            logger.info(
                "MemoryAuthorRepository: Author restored",
                extra={"author_id": author_id, "author_name": author.name},
            )
            return author.model_copy(deep=True)

    async def generate_id(self) -> str:
        """Generate a unique author identifier.

        Returns:
            Unique author ID string
        """
        return self.generate_entity_id("author")

    def _add_entity_specific_log_data(
        self, entity: Author, log_data: Dict[str, Any]
    ) -> None:
        """Add author-specific data to log entries."""
        super()._add_entity_specific_log_data(entity, log_data)
        log_data["author_name"] = entity.name
