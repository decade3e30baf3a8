"""
Domain tests for the Authors domain.

These tests document the design decisions behind the Author model and the
AuthorManager domain service.
"""
