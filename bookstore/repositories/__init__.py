"""
Repository protocols for the bookstore domain.

Implementation packages:
- memory: In-memory implementations for testing
"""

from .base import BaseRepository
from .author import AuthorRepository

__all__ = [
    "AuthorRepository",
    "BaseRepository",
]
