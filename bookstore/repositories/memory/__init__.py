"""
Memory repository implementations for the bookstore domain.

These implementations use Python dictionaries for storage and are ideal for
testing scenarios where external dependencies should be avoided. They keep
the same async interfaces, and the same constraints, as storage-backed
implementations.
"""

from .author import MemoryAuthorRepository

__all__ = [
    "MemoryAuthorRepository",
]
