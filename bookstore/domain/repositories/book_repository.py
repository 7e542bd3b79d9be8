"""
Book Repository Interface.
Defines specific data access operations for Books.
"""

from typing import List, Optional

from bookstore.domain.repositories.base import BaseRepository
from bookstore.domain.models.book import Book
from bookstore.domain.schemas.book import BookStats
from bookstore.infrastructure.repositories.query import PageParams, PageResult


class BookRepository(BaseRepository[Book]):
    """Interface for Book-specific operations."""

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN."""
        ...

    def get_with_filters(
        self,
        params: PageParams,
        search: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> PageResult[Book]:
        """Get books matching a search term and/or category, one page at a time."""
        ...

    def get_low_stock(self, threshold: int = 10) -> List[Book]:
        """Get books with quantity at or below the threshold."""
        ...

    def get_by_category(self, category_id: int) -> List[Book]:
        """Get every book in a category, by title."""
        ...

    def update_stock(self, id: int, quantity: int) -> Book:
        """Set only the quantity of a book."""
        ...

    def get_stats(self, low_stock_threshold: int = 10) -> BookStats:
        """Get dashboard statistics."""
        ...
