"""
SQLAlchemy Implementation of Book Repository.
"""

from typing import List, Optional

import structlog
from sqlalchemy import func

from bookstore.domain.models.book import Book
from bookstore.domain.models.category import Category
from bookstore.domain.repositories.book_repository import BookRepository
from bookstore.domain.schemas.book import BookStats
from bookstore.infrastructure.repositories.base_repository import SQLAlchemyRepository, utcnow
from bookstore.infrastructure.repositories.query import PageParams, PageResult, QueryFilter

logger = structlog.get_logger(__name__)


def book_filter(search: Optional[str] = None, category_id: Optional[int] = None) -> QueryFilter:
    """Predicates for a book listing; shared by the page and its count."""
    return (
        QueryFilter()
        .search(search, Book.title, Book.author, Book.isbn)
        .equals(Book.category_id, category_id)
    )


class SQLAlchemyBookRepository(SQLAlchemyRepository[Book], BookRepository):
    """Book repository implementation using SQLAlchemy.

    Every Book load left-joins its category so ``category_name`` is populated.
    """

    entity_name = "Book"

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.db.query(Book).filter(Book.isbn == isbn.strip()).first()

    def get_with_filters(
        self,
        params: PageParams,
        search: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> PageResult[Book]:
        """Get books with filtering and pagination."""
        return self.list(params, book_filter(search, category_id))

    def get_low_stock(self, threshold: int = 10) -> List[Book]:
        """Get books at or below ``threshold`` copies, scarcest first."""
        return (
            self.db.query(Book)
            .filter(Book.quantity <= threshold)
            .order_by(Book.quantity.asc(), Book.id.asc())
            .all()
        )

    def get_by_category(self, category_id: int) -> List[Book]:
        return (
            self.db.query(Book)
            .filter(Book.category_id == category_id)
            .order_by(Book.title.asc())
            .all()
        )

    def update_stock(self, id: int, quantity: int) -> Book:
        """Touch only ``quantity`` and ``updated_at``."""
        matched = (
            self.db.query(Book)
            .filter(Book.id == id)
            .update({"quantity": quantity, "updated_at": utcnow()}, synchronize_session=False)
        )
        if matched == 0:
            self.db.rollback()
            raise self.not_found(id)
        self.db.commit()

        logger.info("Book stock updated", book_id=id, new_quantity=quantity)
        return self.get_by_id(id)

    def get_stats(self, low_stock_threshold: int = 10) -> BookStats:
        """Get dashboard statistics."""
        total_books = self.db.query(func.count(Book.id)).scalar() or 0
        total_categories = self.db.query(func.count(Category.id)).scalar() or 0
        low_stock = self.db.query(func.count(Book.id)).filter(
            Book.quantity <= low_stock_threshold
        ).scalar() or 0
        total_value = self.db.query(
            func.coalesce(func.sum(Book.price * Book.quantity), 0)
        ).scalar()

        return BookStats(
            total_books=total_books,
            total_categories=total_categories,
            low_stock_books=low_stock,
            total_value=round(float(total_value or 0), 2),
        )
