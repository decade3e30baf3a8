"""
Domain layer for the bookstore Authors domain.

This package contains the Author aggregate, the AuthorManager domain
service and the domain errors. Nothing here knows how authors are stored.

Import domain components from this package, e.g.:
    from bookstore.domain import Author
    from bookstore.domain.author_manager import AuthorManager
"""

from .exceptions import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
    BookStoreError,
    BusinessError,
    DomainValidationError,
)
from .author import Author, AuthorConstants, name_key, validate_author_name

__all__ = [
    "Author",
    "AuthorAlreadyExistsError",
    "AuthorConstants",
    "AuthorNotFoundError",
    "BookStoreError",
    "BusinessError",
    "DomainValidationError",
    "name_key",
    "validate_author_name",
]
