"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic create/read operations.

    Records in this system are never deleted, so there is no delete.
    """

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Update an existing entity."""
        ...

    def count(self) -> int:
        """Count all entities."""
        ...
