"""
Category Repository Interface.
Defines specific data access operations for Categories.
"""

from typing import Any, Dict, List, Optional

from bookstore.domain.repositories.base import BaseRepository
from bookstore.domain.models.category import Category
from bookstore.infrastructure.repositories.query import PageParams, PageResult


class CategoryRepository(BaseRepository[Category]):
    """Interface for Category-specific operations."""

    def get_with_filters(self, params: PageParams, search: Optional[str] = None) -> PageResult[Category]:
        """Get categories matching a search term, one page at a time."""
        ...

    def count_books(self, id: int) -> int:
        """Count books referencing the category."""
        ...

    def list_simple(self) -> List[Category]:
        """Get all categories ordered by name."""
        ...

    def list_with_book_count(self) -> List[Dict[str, Any]]:
        """Get all categories with the number of books in each."""
        ...
