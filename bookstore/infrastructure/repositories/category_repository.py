"""
SQLAlchemy Implementation of Category Repository.
"""

from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import func

from bookstore.core.exceptions import CategoryHasBooksException
from bookstore.domain.models.book import Book
from bookstore.domain.models.category import Category
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.infrastructure.repositories.base_repository import SQLAlchemyRepository
from bookstore.infrastructure.repositories.query import PageParams, PageResult, QueryFilter

logger = structlog.get_logger(__name__)


class SQLAlchemyCategoryRepository(SQLAlchemyRepository[Category], CategoryRepository):
    """Category repository implementation using SQLAlchemy."""

    entity_name = "Category"

    def get_with_filters(self, params: PageParams, search: Optional[str] = None) -> PageResult[Category]:
        """Get categories with search and pagination."""
        query_filter = QueryFilter().search(search, Category.name, Category.description)
        return self.list(params, query_filter)

    def count_books(self, id: int) -> int:
        return self.db.query(func.count(Book.id)).filter(Book.category_id == id).scalar() or 0

    def delete(self, id: int) -> None:
        """Delete a category, refusing while any book still points at it."""
        book_count = self.count_books(id)
        if book_count > 0:
            logger.info("Category delete blocked", category_id=id, book_count=book_count)
            raise CategoryHasBooksException(id, book_count)
        super().delete(id)

    def list_simple(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.name.asc()).all()

    def list_with_book_count(self) -> List[Dict[str, Any]]:
        """Get every category with its number of books."""
        results = (
            self.db.query(
                Category.id,
                Category.name,
                Category.description,
                Category.created_at,
                Category.updated_at,
                func.count(Book.id).label("book_count"),
            )
            .outerjoin(Book, Book.category_id == Category.id)
            .group_by(
                Category.id,
                Category.name,
                Category.description,
                Category.created_at,
                Category.updated_at,
            )
            .order_by(Category.name.asc())
            .all()
        )
        return [dict(r._mapping) for r in results]
