"""Shared interfaces and protocols."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Base repository interface for entities keyed by an integer id."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get entity by ID, or None if it does not exist."""
        pass

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Persist a new entity and return it with its generated ID."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity."""
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Delete an entity. Deleting a missing entity is a no-op."""
        pass
