"""
Tests for AuthorService.

This module checks the application-level author operations against the
in-memory repository, following the repository interaction patterns of
the domain layer.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from bookstore.domain import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
    DomainValidationError,
)
from bookstore.domain.author_manager import AuthorManager
from bookstore.repositories.memory import MemoryAuthorRepository
from bookstore.use_cases import (
    AuthorService,
    CreateAuthorRequest,
    GetAuthorListRequest,
    UpdateAuthorRequest,
)
from bookstore.validation import RepositoryValidationError


class TestAuthorService:
    """Test cases for AuthorService business logic."""

    @pytest.fixture
    def author_repo(self) -> MemoryAuthorRepository:
        """Create a memory AuthorRepository for testing."""
        return MemoryAuthorRepository()

    @pytest.fixture
    def service(self, author_repo: MemoryAuthorRepository) -> AuthorService:
        """Create AuthorService with memory repository dependencies."""
        return AuthorService(
            author_repo=author_repo,
            author_manager=AuthorManager(author_repo),
            max_page_size=3,
        )

    @staticmethod
    def _create_request(name: str, year: int = 1900) -> CreateAuthorRequest:
        return CreateAuthorRequest(
            name=name, birth_date=date(year, 1, 1), short_bio=f"{name} bio"
        )

    def test_rejects_invalid_repository(self) -> None:
        with pytest.raises(RepositoryValidationError):
            AuthorService(
                author_repo=object(),  # type: ignore[arg-type]
                author_manager=AuthorManager(MemoryAuthorRepository()),
            )

    @pytest.mark.asyncio
    async def test_create_author_persists(
        self, service: AuthorService, author_repo: MemoryAuthorRepository
    ) -> None:
        author = await service.create_author(
            self._create_request("Victor Hugo", 1802)
        )

        stored = await author_repo.get(author.author_id)
        assert stored is not None
        assert stored.name == "Victor Hugo"
        assert stored.birth_date == date(1802, 1, 1)
        assert stored.short_bio == "Victor Hugo bio"

    @pytest.mark.asyncio
    async def test_create_author_duplicate_name(
        self, service: AuthorService, author_repo: MemoryAuthorRepository
    ) -> None:
        await service.create_author(self._create_request("Victor Hugo"))

        with pytest.raises(AuthorAlreadyExistsError):
            await service.create_author(self._create_request("Victor Hugo"))

        assert await author_repo.count() == 1

    @pytest.mark.asyncio
    async def test_create_author_name_too_long(
        self, service: AuthorService
    ) -> None:
        with pytest.raises(DomainValidationError):
            await service.create_author(self._create_request("x" * 65))

    def test_create_request_rejects_blank_name(self) -> None:
        with pytest.raises(ValidationError):
            CreateAuthorRequest(name="  ", birth_date=date(1900, 1, 1))

    @pytest.mark.asyncio
    async def test_create_author_save_failure_propagates(
        self, service: AuthorService, author_repo: MemoryAuthorRepository
    ) -> None:
        author_repo.save = AsyncMock(  # type: ignore[method-assign]
            side_effect=RuntimeError("disk full")
        )

        with pytest.raises(RuntimeError, match="disk full"):
            await service.create_author(self._create_request("Victor Hugo"))

    @pytest.mark.asyncio
    async def test_get_author_not_found(self, service: AuthorService) -> None:
        with pytest.raises(AuthorNotFoundError) as exc_info:
            await service.get_author("author-missing")

        assert exc_info.value.author_id == "author-missing"

    @pytest.mark.asyncio
    async def test_update_author_renames_and_sets_fields(
        self, service: AuthorService
    ) -> None:
        created = await service.create_author(
            self._create_request("Victor Hugo")
        )

        await service.update_author(
            created.author_id,
            UpdateAuthorRequest(
                name="Victor-Marie Hugo",
                birth_date=date(1802, 2, 26),
                short_bio=None,
            ),
        )

        stored = await service.get_author(created.author_id)
        assert stored.name == "Victor-Marie Hugo"
        assert stored.birth_date == date(1802, 2, 26)
        assert stored.short_bio is None

    @pytest.mark.asyncio
    async def test_update_author_keeping_name(
        self, service: AuthorService
    ) -> None:
        created = await service.create_author(
            self._create_request("Victor Hugo")
        )

        updated = await service.update_author(
            created.author_id,
            UpdateAuthorRequest(
                name="Victor Hugo", birth_date=date(1802, 2, 26)
            ),
        )

        assert updated.name == "Victor Hugo"
        assert updated.birth_date == date(1802, 2, 26)

    @pytest.mark.asyncio
    async def test_update_author_to_taken_name(
        self, service: AuthorService
    ) -> None:
        await service.create_author(self._create_request("Victor Hugo"))
        dumas = await service.create_author(
            self._create_request("Alexandre Dumas")
        )

        with pytest.raises(AuthorAlreadyExistsError):
            await service.update_author(
                dumas.author_id,
                UpdateAuthorRequest(
                    name="Victor Hugo", birth_date=date(1802, 7, 24)
                ),
            )

        stored = await service.get_author(dumas.author_id)
        assert stored.name == "Alexandre Dumas"
        assert stored.birth_date == date(1900, 1, 1)

    @pytest.mark.asyncio
    async def test_update_missing_author(self, service: AuthorService) -> None:
        with pytest.raises(AuthorNotFoundError):
            await service.update_author(
                "author-missing",
                UpdateAuthorRequest(
                    name="Victor Hugo", birth_date=date(1802, 2, 26)
                ),
            )

    @pytest.mark.asyncio
    async def test_delete_author_frees_name(
        self, service: AuthorService
    ) -> None:
        created = await service.create_author(
            self._create_request("Victor Hugo")
        )

        await service.delete_author(created.author_id)
        await service.delete_author(created.author_id)

        with pytest.raises(AuthorNotFoundError):
            await service.get_author(created.author_id)
        await service.create_author(self._create_request("Victor Hugo"))

    @pytest.mark.asyncio
    async def test_list_authors_pages_and_counts(
        self, service: AuthorService
    ) -> None:
        for name in ["Victor Hugo", "Alexandre Dumas", "Émile Zola"]:
            await service.create_author(self._create_request(name))

        page = await service.list_authors(
            GetAuthorListRequest(skip_count=1, max_result_count=1)
        )

        assert page.total_count == 3
        assert [a.name for a in page.items] == ["Victor Hugo"]

    @pytest.mark.asyncio
    async def test_list_authors_defaults(self, service: AuthorService) -> None:
        for name in ["Victor Hugo", "Alexandre Dumas"]:
            await service.create_author(self._create_request(name))

        page = await service.list_authors()

        assert page.total_count == 2
        assert [a.name for a in page.items] == [
            "Alexandre Dumas",
            "Victor Hugo",
        ]

    @pytest.mark.asyncio
    async def test_list_authors_caps_page_size(
        self, service: AuthorService
    ) -> None:
        for i in range(5):
            await service.create_author(self._create_request(f"Author {i}"))

        page = await service.list_authors(
            GetAuthorListRequest(max_result_count=100)
        )

        assert page.total_count == 5
        assert len(page.items) == 3

    @pytest.mark.asyncio
    async def test_list_authors_filter_and_sorting(
        self, service: AuthorService
    ) -> None:
        await service.create_author(self._create_request("Victor Hugo", 1802))
        await service.create_author(self._create_request("Hugo Ball", 1886))
        await service.create_author(self._create_request("Émile Zola", 1840))

        page = await service.list_authors(
            GetAuthorListRequest(filter="hugo", sorting="birth_date desc")
        )

        assert page.total_count == 2
        assert [a.name for a in page.items] == ["Hugo Ball", "Victor Hugo"]

    def test_list_request_rejects_negative_bounds(self) -> None:
        with pytest.raises(ValidationError):
            GetAuthorListRequest(skip_count=-1)
        with pytest.raises(ValidationError):
            GetAuthorListRequest(max_result_count=-1)
