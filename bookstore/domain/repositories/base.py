"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID, or None."""
        ...

    def list(self, params: Any, query_filter: Any = None) -> Any:
        """List entities one page at a time."""
        ...

    def create(self, obj_in: Any) -> T:
        """Insert an entity and return it as stored."""
        ...

    def update(self, id: int, obj_in: Any) -> T:
        """Update an entity; raises EntityNotFoundException if it is gone."""
        ...

    def delete(self, id: int) -> None:
        """Delete an entity; raises EntityNotFoundException if it is gone."""
        ...
