"""Book service — write-side checks around the book repository."""

from typing import Optional

from bookstore.core.exceptions import (
    BusinessRuleViolationException,
    DuplicateEntityException,
    EntityNotFoundException,
)
from bookstore.domain.models.book import Book
from bookstore.domain.repositories.book_repository import BookRepository
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.domain.schemas.book import BookCreate, BookUpdate


def _check_category(categories: CategoryRepository, category_id: Optional[int]) -> None:
    if category_id is not None and categories.get_by_id(category_id) is None:
        raise BusinessRuleViolationException("Category does not exist", {"category_id": category_id})


def _check_isbn(books: BookRepository, isbn: str, book_id: Optional[int] = None) -> None:
    existing = books.get_by_isbn(isbn)
    if existing is not None and existing.id != book_id:
        raise DuplicateEntityException("Book with this ISBN already exists", {"isbn": isbn})


def get_book(books: BookRepository, book_id: int) -> Book:
    book = books.get_by_id(book_id)
    if book is None:
        raise EntityNotFoundException("Book not found", {"id": book_id})
    return book


def create_book(books: BookRepository, categories: CategoryRepository, body: BookCreate) -> Book:
    _check_isbn(books, body.isbn)
    _check_category(categories, body.category_id)
    return books.create(body.model_dump())


def update_book(books: BookRepository, categories: CategoryRepository, book_id: int, body: BookUpdate) -> Book:
    """Replace every editable field of a book."""
    _check_isbn(books, body.isbn, book_id)
    _check_category(categories, body.category_id)
    return books.update(book_id, body.model_dump())


def update_stock(books: BookRepository, book_id: int, quantity: int) -> Book:
    if quantity < 0:
        raise BusinessRuleViolationException("Quantity cannot be negative", {"quantity": quantity})
    return books.update_stock(book_id, quantity)
