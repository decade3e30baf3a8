"""
AuthorManager domain service.

The manager is the only component allowed to construct an Author or change
its name. Both paths check name uniqueness against the repository before
touching any state; neither path persists anything, that remains the
caller's job.

The uniqueness check here is optimistic: two concurrent creates of the same
name can both pass it. Repository ``save`` implementations are expected to
enforce the constraint again at the storage boundary.
"""

import logging
from datetime import date
from typing import Optional

from bookstore.repositories.author import AuthorRepository
from bookstore.validation import ensure_repository_protocol

from .author import Author, AuthorConstants, validate_author_name
from .exceptions import AuthorAlreadyExistsError

logger = logging.getLogger(__name__)


class AuthorManager:
    """
    Domain service guarding the author name uniqueness rule.

    The manager holds no state between calls and caches nothing; every
    operation performs exactly one repository lookup, and repository
    failures propagate unchanged.
    """

    def __init__(
        self,
        author_repo: AuthorRepository,
        max_name_length: int = AuthorConstants.MAX_NAME_LENGTH,
    ) -> None:
        """Initialize the manager.

        Args:
            author_repo: Repository used for name lookups and ID generation
            max_name_length: Maximum name length, at most
                AuthorConstants.MAX_NAME_LENGTH
        """
        if not 1 <= max_name_length <= AuthorConstants.MAX_NAME_LENGTH:
            raise ValueError(
                f"max_name_length must be between 1 and "
                f"{AuthorConstants.MAX_NAME_LENGTH}"
            )
        self.author_repo = ensure_repository_protocol(
            author_repo, AuthorRepository  # type: ignore[type-abstract]
        )
        self.max_name_length = max_name_length

    def validate_name(self, name: Optional[str]) -> str:
        """Validate a candidate name and return it trimmed.

        Raises:
            DomainValidationError: If the name is blank or too long
        """
        return validate_author_name(name, self.max_name_length)

    async def create(
        self,
        name: str,
        birth_date: date,
        short_bio: Optional[str] = None,
    ) -> Author:
        """Create a new, unsaved Author.

        Args:
            name: Author name, trimmed before use
            birth_date: Author birth date
            short_bio: Optional free-text biography

        Returns:
            A new Author with a freshly generated ID. It is not persisted.

        Raises:
            DomainValidationError: If the name is invalid. No lookup is made.
            AuthorAlreadyExistsError: If a live author has the same name
        """
        name = self.validate_name(name)

        existing = await self.author_repo.find_by_name(name)
        if existing is not None:
            logger.warning(
                "Author creation rejected, name already taken",
                extra={
                    "author_name": name,
                    "existing_author_id": existing.author_id,
                },
            )
            raise AuthorAlreadyExistsError(name)

        author_id = await self.author_repo.generate_id()
        author = Author(
            author_id=author_id,
            name=name,
            birth_date=birth_date,
            short_bio=short_bio,
        )

        logger.info(
            "Author created",
            extra={"author_id": author_id, "author_name": name},
        )
        return author

    async def rename(self, author: Author, new_name: str) -> Author:
        """Change an author's name in place.

        Renaming an author to the name it already holds is not a conflict.

        Args:
            author: The author to rename
            new_name: The requested name, trimmed before use

        Returns:
            The same Author object with its name changed. It is not
            persisted.

        Raises:
            ValueError: If author is None
            DomainValidationError: If the new name is invalid
            AuthorAlreadyExistsError: If a different live author holds the
                name. The author is left unchanged.
        """
        if author is None:
            raise ValueError("Author is required")

        new_name = self.validate_name(new_name)

        existing = await self.author_repo.find_by_name(new_name)
        if existing is not None and existing.author_id != author.author_id:
            logger.warning(
                "Author rename rejected, name already taken",
                extra={
                    "author_id": author.author_id,
                    "author_name": new_name,
                    "existing_author_id": existing.author_id,
                },
            )
            raise AuthorAlreadyExistsError(new_name)

        old_name = author.name
        author._set_name(new_name, self.max_name_length)

        logger.info(
            "Author renamed",
            extra={
                "author_id": author.author_id,
                "old_name": old_name,
                "new_name": new_name,
            },
        )
        return author
