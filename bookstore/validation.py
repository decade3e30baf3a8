"""
Startup check that a storage backend can serve the author use cases.

AuthorManager and AuthorService accept any object as their repository.
They check it here against the ``@runtime_checkable`` protocol they need,
so a backend missing ``find_by_name`` or ``restore`` is rejected when the
application is wired, not halfway through renaming an author.
"""

import logging
from typing import List, Type, TypeVar

logger = logging.getLogger(__name__)

P = TypeVar("P")


class RepositoryValidationError(TypeError):
    """A repository lacks operations its protocol requires.

    Attributes:
        repository_type: Class name of the rejected repository
        protocol_name: Name of the protocol it was checked against
        missing: Protocol members the repository does not provide
    """

    def __init__(
        self, repository_type: str, protocol_name: str, missing: List[str]
    ) -> None:
        self.repository_type = repository_type
        self.protocol_name = protocol_name
        self.missing = missing
        detail = ", ".join(missing) if missing else "incompatible members"
        super().__init__(
            f"{repository_type} cannot be used as {protocol_name}: "
            f"missing {detail}"
        )


def _missing_members(repository: object, protocol: type) -> List[str]:
    members = getattr(protocol, "__protocol_attrs__", None)
    if members is None:
        members = [
            name
            for name in dir(protocol)
            if not name.startswith("_") and callable(getattr(protocol, name))
        ]
    return sorted(
        name
        for name in members
        if not callable(getattr(repository, name, None))
    )


def validate_repository_protocol(
    repository: object, protocol: Type[P]
) -> None:
    """Reject a repository that does not implement ``protocol``.

    Raises:
        RepositoryValidationError: Naming the operations that are missing

    Example:
        >>> from bookstore.repositories import AuthorRepository
        >>> from bookstore.repositories.memory import MemoryAuthorRepository
        >>> validate_repository_protocol(
        ...     MemoryAuthorRepository(), AuthorRepository
        ... )
    """
    repository_type = type(repository).__name__
    if isinstance(repository, protocol):
        logger.debug(
            f"{repository_type} accepted as {protocol.__name__}",
            extra={"repository_type": repository_type},
        )
        return

    missing = _missing_members(repository, protocol)
    logger.error(
        f"{repository_type} rejected as {protocol.__name__}",
        extra={"repository_type": repository_type, "missing": missing},
    )
    raise RepositoryValidationError(repository_type, protocol.__name__, missing)


def ensure_repository_protocol(repository: object, protocol: Type[P]) -> P:
    """Check ``repository`` and hand it back typed as ``protocol``."""
    validate_repository_protocol(repository, protocol)
    return repository  # type: ignore[return-value]
