"""
Dependency wiring for the Authors domain.
"""

import logging
from typing import Any, Callable, Dict, Optional

from bookstore.config import AuthorSettings, load_settings
from bookstore.domain.author_manager import AuthorManager
from bookstore.repositories import AuthorRepository
from bookstore.repositories.memory import MemoryAuthorRepository
from bookstore.use_cases import AuthorService

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency injection container with singleton lifecycle management.

    The repository is the in-memory implementation unless one is supplied;
    storage-backed deployments pass their own.
    """

    def __init__(
        self,
        settings: Optional[AuthorSettings] = None,
        author_repo: Optional[AuthorRepository] = None,
    ) -> None:
        self._instances: Dict[str, Any] = {}
        if settings is not None:
            self._instances["settings"] = settings
        if author_repo is not None:
            self._instances["author_repo"] = author_repo

    def get_or_create(self, key: str, factory: Callable[[], Any]) -> Any:
        """Get or create a singleton instance."""
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_settings(self) -> AuthorSettings:
        return self.get_or_create("settings", load_settings)  # type: ignore[no-any-return]

    def get_author_repository(self) -> AuthorRepository:
        return self.get_or_create(  # type: ignore[no-any-return]
            "author_repo", self._create_author_repository
        )

    def _create_author_repository(self) -> AuthorRepository:
        settings = self.get_settings()
        logger.debug(
            "Creating MemoryAuthorRepository",
            extra={"case_sensitive_names": settings.case_sensitive_names},
        )
        return MemoryAuthorRepository(
            case_sensitive_names=settings.case_sensitive_names,
            default_sorting=settings.default_sorting,
        )

    def get_author_manager(self) -> AuthorManager:
        return self.get_or_create(  # type: ignore[no-any-return]
            "author_manager",
            lambda: AuthorManager(
                self.get_author_repository(),
                max_name_length=self.get_settings().max_name_length,
            ),
        )

    def get_author_service(self) -> AuthorService:
        return self.get_or_create(  # type: ignore[no-any-return]
            "author_service",
            lambda: AuthorService(
                author_repo=self.get_author_repository(),
                author_manager=self.get_author_manager(),
                default_sorting=self.get_settings().default_sorting,
                max_page_size=self.get_settings().max_page_size,
            ),
        )
