"""
Authors domain for the bookstore application.

Subpackages:
- domain: Author entity, AuthorManager domain service and domain errors
- repositories: Repository protocols and in-memory implementations
- use_cases: Application services orchestrating the domain
"""
