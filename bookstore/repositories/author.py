"""
Author repository interface defined as Protocol.

Besides the generic CRUD operations, the author repository offers a lookup
by name, which AuthorManager needs to enforce name uniqueness, and a paged
listing with sorting and filtering for application services.

Implementations must also enforce name uniqueness themselves when saving
(a unique index, or an equivalent guarded check). AuthorManager's check is
an early, friendly rejection; it cannot prevent two concurrent creates of
the same name on its own.
"""

from typing import List, Optional, Protocol, runtime_checkable

from bookstore.domain.author import Author

from .base import BaseRepository


@runtime_checkable
class AuthorRepository(BaseRepository[Author], Protocol):
    """Handles author storage and retrieval operations."""

    async def find_by_name(self, name: str) -> Optional[Author]:
        """Find the live author currently holding a name.

        Args:
            name: Name to look up. Implementations compare names using
                their configured policy (exact or case-insensitive) after
                trimming.

        Returns:
            The author holding the name, or None

        Implementation Notes:
        - Must reflect prior saves immediately (no stale caching)
        - Deleted authors never match
        """
        ...

    async def list(
        self,
        skip_count: int,
        max_result_count: int,
        sorting: Optional[str] = None,
        filter: Optional[str] = None,
    ) -> List[Author]:
        """Return one page of live authors.

        Args:
            skip_count: Number of authors to skip (>= 0)
            max_result_count: Maximum number of authors to return (>= 0)
            sorting: "<field>" or "<field> asc|desc"; field is one of
                name, birth_date, created_at. Defaults to name.
            filter: Optional text; only authors whose name contains it,
                case-insensitively, are returned

        Raises:
            ValueError: On negative bounds or an unknown sort field or
                direction
        """
        ...

    async def count(self, filter: Optional[str] = None) -> int:
        """Count live authors matching the same filter as ``list``."""
        ...

    async def save(self, author: Author) -> None:
        """Insert or update an author.

        Saving never undeletes: only ``restore`` brings a deleted author
        back, and the stored deletion state wins over the caller's copy.

        Raises:
            AuthorNotFoundError: If the stored author is soft deleted
            AuthorAlreadyExistsError: If a different live author holds the
                same name
        """
        ...

    async def restore(self, author_id: str) -> Author:
        """Undo a soft delete.

        Returns:
            The restored author

        Raises:
            AuthorNotFoundError: If no author, deleted or not, has the ID
            AuthorAlreadyExistsError: If a live author took the name while
                this one was deleted
        """
        ...
