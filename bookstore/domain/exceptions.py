"""
Domain errors for the Authors domain.

Two kinds of failure are expected from the domain layer:

- **Validation errors**: malformed input, always the caller's fault and
  never retried automatically.
- **Business errors**: a domain rule would be violated. They carry a stable
  ``code`` and a ``details`` dict so that an outer presentation layer can
  render a friendly, localized message without parsing ``str(exc)``.
"""

from typing import Any, Dict, Optional


class BookStoreError(Exception):
    """Base class for all bookstore domain errors."""


class BusinessError(BookStoreError):
    """A domain rule was violated.

    Attributes:
        code: Stable error code for presentation layers
        details: Values referenced by the user-facing message
    """

    code: str = "BookStore:00000"

    def __init__(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.details: Dict[str, Any] = details or {}


class AuthorAlreadyExistsError(BusinessError):
    """Raised when an author name is already held by another author."""

    code = "BookStore:00001"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"There is already an author with the same name: {name}",
            details={"name": name},
        )
        self.name = name


class DomainValidationError(BookStoreError, ValueError):
    """Raised when a domain field fails validation."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class AuthorNotFoundError(BookStoreError, LookupError):
    """Raised when no live author has the requested id."""

    def __init__(self, author_id: str) -> None:
        super().__init__(f"Author not found: {author_id}")
        self.author_id = author_id
