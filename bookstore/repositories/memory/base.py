"""
Shared helpers for in-memory repository implementations.

MemoryRepositoryMixin keeps entities in a dictionary keyed by ID and
provides the common get/save/soft-delete/ID-generation logic with the
structured logging every memory repository emits. Concrete repositories
set ``logger``, ``entity_name``, ``id_field`` and ``storage_dict`` in their
``__init__``.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def parse_sorting(
    sorting: Optional[str], allowed_fields: Tuple[str, ...], default: str
) -> Tuple[str, bool]:
    """Parse a "<field> [asc|desc]" sorting expression.

    Returns:
        (field, descending)

    Raises:
        ValueError: If the field or direction is not recognised
    """
    parts = (sorting or default).split()
    if not parts or len(parts) > 2:
        raise ValueError(f"Invalid sorting: {sorting!r}")

    field = parts[0]
    if field not in allowed_fields:
        raise ValueError(
            f"Cannot sort by {field!r}, expected one of {allowed_fields}"
        )

    direction = parts[1].lower() if len(parts) == 2 else "asc"
    if direction not in ("asc", "desc"):
        raise ValueError(f"Invalid sort direction: {parts[1]!r}")
    return field, direction == "desc"


def paginate(items: List[T], skip_count: int, max_result_count: int) -> List[T]:
    if skip_count < 0:
        raise ValueError("skip_count must not be negative")
    if max_result_count < 0:
        raise ValueError("max_result_count must not be negative")
    return items[skip_count : skip_count + max_result_count]


class MemoryRepositoryMixin(Generic[T]):
    """Dictionary-backed storage with soft delete."""

    logger: logging.Logger
    entity_name: str
    id_field: str
    storage_dict: Dict[str, T]

    def get_entity(self, entity_id: str) -> Optional[T]:
        """Return a live entity by ID, or None."""
        self.logger.debug(
            f"Memory{self.entity_name}Repository: Attempting to retrieve "
            f"{self.entity_name.lower()}",
            extra={"entity_id": entity_id},
        )

        entity = self.storage_dict.get(entity_id)
        if entity is None or getattr(entity, "deleted_at", None) is not None:
            self.logger.debug(
                f"Memory{self.entity_name}Repository: "
                f"{self.entity_name} not found",
                extra={"entity_id": entity_id},
            )
            return None

        return entity.model_copy(deep=True)

    def live_entities(
        self, predicate: Optional[Callable[[T], bool]] = None
    ) -> List[T]:
        """Return the stored (not copied) entities that are not deleted."""
        return [
            entity
            for entity in self.storage_dict.values()
            if getattr(entity, "deleted_at", None) is None
            and (predicate is None or predicate(entity))
        ]

    def save_entity(self, entity: T) -> T:
        """Store a copy of an entity, refreshing its updated_at timestamp.

        Returns:
            The entity as stored
        """
        entity_id = getattr(entity, self.id_field)
        if "updated_at" in type(entity).model_fields:
            # Assign on the caller's object so it sees the stored timestamp
            entity.updated_at = datetime.now(timezone.utc)  # type: ignore[attr-defined]

        self.storage_dict[entity_id] = entity.model_copy(deep=True)

        log_data: Dict[str, Any] = {"entity_id": entity_id}
        self._add_entity_specific_log_data(entity, log_data)
        self.logger.info(
            f"Memory{self.entity_name}Repository: {self.entity_name} "
            "saved successfully",
            extra=log_data,
        )
        return entity

    def soft_delete_entity(self, entity_id: str) -> None:
        """Mark an entity deleted. Missing or deleted entities are ignored."""
        entity = self.storage_dict.get(entity_id)
        if entity is None or getattr(entity, "deleted_at", None) is not None:
            self.logger.debug(
                f"Memory{self.entity_name}Repository: Nothing to delete",
                extra={"entity_id": entity_id},
            )
            return

        now = datetime.now(timezone.utc)
        entity.deleted_at = now  # type: ignore[attr-defined]
        if "updated_at" in type(entity).model_fields:
            entity.updated_at = now  # type: ignore[attr-defined]
        self.logger.info(
            f"Memory{self.entity_name}Repository: {self.entity_name} "
            "deleted",
            extra={"entity_id": entity_id},
        )

    def generate_entity_id(self, prefix: str) -> str:
        entity_id = f"{prefix}-{uuid.uuid4()}"
        self.logger.debug(
            f"Memory{self.entity_name}Repository: Generated "
            f"{self.entity_name.lower()} ID",
            extra={"entity_id": entity_id},
        )
        return entity_id

    def _add_entity_specific_log_data(
        self, entity: T, log_data: Dict[str, Any]
    ) -> None:
        """Hook for subclasses to add fields to save log entries."""
        pass
