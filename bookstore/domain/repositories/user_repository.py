"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import Optional

from bookstore.domain.repositories.base import BaseRepository
from bookstore.domain.models.user import User
from bookstore.infrastructure.repositories.query import PageParams, PageResult


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email (case-insensitive)."""
        ...

    def get_with_filters(self, params: PageParams, search: Optional[str] = None) -> PageResult[User]:
        """Get users matching a search term, one page at a time."""
        ...
