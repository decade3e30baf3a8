"""
Generic base repository protocol for common CRUD operations.

All repository operations follow the same principles:

- **Idempotency**: Methods are safe to retry. Multiple calls with the same
  parameters produce the same result without unintended side effects.

- **Domain Objects**: Methods accept and return domain objects or
  primitives, never storage-specific types.

- **Soft Delete**: Entities marked deleted are invisible to every read
  operation.
"""

from typing import Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

# Type variable bound to Pydantic BaseModel for domain entities
T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class BaseRepository(Protocol[T]):
    """Generic base repository protocol for common CRUD operations.

    Type Parameter:
        T: The domain entity type (must extend Pydantic BaseModel)
    """

    async def get(self, entity_id: str) -> Optional[T]:
        """Retrieve an entity by ID.

        Args:
            entity_id: Unique entity identifier

        Returns:
            Entity if found and not deleted, None otherwise
        """
        ...

    async def save(self, entity: T) -> None:
        """Save an entity.

        Args:
            entity: Complete entity to save

        Implementation Notes:
        - Must be idempotent: saving same entity state is safe
        - Should update the updated_at timestamp
        - Handles both new entities and updates to existing ones
        """
        ...

    async def delete(self, entity_id: str) -> None:
        """Soft delete an entity.

        Implementation Notes:
        - Sets deleted_at, the record itself is kept
        - Idempotent: deleting a deleted or missing entity is a no-op
        """
        ...

    async def generate_id(self) -> str:
        """Generate a unique entity identifier.

        Returns:
            Unique entity ID string

        Implementation Notes:
        - Must generate globally unique identifiers
        - May use UUIDs, database sequences, or distributed ID generators
        """
        ...
