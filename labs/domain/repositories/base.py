"""
Repository Interface - Base

Generic persistence contract shared by every resource. Filters are passed as
keyword arguments naming entity fields (``company_id=..., user_id=...``);
soft-deleted records are never returned.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar
from uuid import UUID

from labs.domain.entities.base import Entity

T = TypeVar("T", bound=Entity)


class IRepository(ABC, Generic[T]):
    """Interface for entity repositories."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it."""
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """
        Find a live entity by its ID.

        Args:
            entity_id: The unique identifier of the entity

        Returns:
            The entity if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_one(self, **filters: Any) -> Optional[T]:
        """Return the first live entity matching the filters."""
        pass

    @abstractmethod
    async def find_page(
        self, skip: int = 0, limit: int = 10, **filters: Any
    ) -> List[T]:
        """
        Return a page of live entities ordered by creation time.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            **filters: Equality filters on entity fields
        """
        pass

    @abstractmethod
    async def find_all(self, **filters: Any) -> List[T]:
        """Return every live entity matching the filters."""
        pass

    @abstractmethod
    async def count(self, **filters: Any) -> int:
        """Count live entities matching the filters."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Replace a stored entity.

        Raises:
            NotFoundError: If the entity does not exist or was deleted
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: UUID) -> bool:
        """Soft delete an entity. Returns False when nothing was deleted."""
        pass

    @abstractmethod
    async def delete_many(self, **filters: Any) -> int:
        """Soft delete every entity matching the filters, returning the count."""
        pass
