"""Books API routes — CRUD, search, stock and inventory stats."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from bookstore.application.services import book_service
from bookstore.config import Settings
from bookstore.domain.repositories.book_repository import BookRepository
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.domain.schemas.book import (
    BookCollection,
    BookCreate,
    BookEnvelope,
    BookList,
    BookRead,
    BookStats,
    BookUpdate,
    LowStockCollection,
    StockUpdate,
)
from bookstore.domain.schemas.common import ApiResponse
from bookstore.infrastructure.repositories.query import MAX_INT, PageParams, coerce_positive_int
from bookstore.interfaces.api.deps import EntityId, get_current_user
from bookstore.interfaces.deps import get_app_settings, get_book_repository, get_category_repository

router = APIRouter(prefix="/api/books", tags=["Books"], dependencies=[Depends(get_current_user)])


def _envelope(book, message: Optional[str] = None) -> ApiResponse[BookEnvelope]:
    return ApiResponse(message=message, data=BookEnvelope(book=BookRead.model_validate(book)))


@router.post("", response_model=ApiResponse[BookEnvelope], status_code=status.HTTP_201_CREATED)
def create_book(
    body: BookCreate,
    books: BookRepository = Depends(get_book_repository),
    categories: CategoryRepository = Depends(get_category_repository),
):
    book = book_service.create_book(books, categories, body)
    return _envelope(book, "Book created successfully")


@router.get("", response_model=ApiResponse[BookList])
def list_books(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    category_id: Optional[str] = None,
    books: BookRepository = Depends(get_book_repository),
):
    """List books; bad paging values fall back to page 1 / 10 per page."""
    result = books.get_with_filters(
        PageParams.from_raw(page, limit),
        search=search,
        category_id=coerce_positive_int(category_id, None),
    )
    return ApiResponse(
        data=BookList(
            books=[BookRead.model_validate(b) for b in result.items],
            pagination=result.pagination,
        )
    )


@router.get("/low-stock", response_model=ApiResponse[LowStockCollection])
def low_stock_books(
    threshold: Optional[int] = Query(None, ge=0, le=MAX_INT),
    books: BookRepository = Depends(get_book_repository),
    settings: Settings = Depends(get_app_settings),
):
    threshold = settings.LOW_STOCK_THRESHOLD if threshold is None else threshold
    items = books.get_low_stock(threshold)
    return ApiResponse(
        data=LowStockCollection(books=[BookRead.model_validate(b) for b in items], threshold=threshold)
    )


@router.get("/stats", response_model=ApiResponse[BookStats])
def book_stats(
    books: BookRepository = Depends(get_book_repository),
    settings: Settings = Depends(get_app_settings),
):
    return ApiResponse(data=books.get_stats(settings.LOW_STOCK_THRESHOLD))


@router.get("/category/{category_id}", response_model=ApiResponse[BookCollection])
def books_by_category(category_id: EntityId, books: BookRepository = Depends(get_book_repository)):
    items = books.get_by_category(category_id)
    return ApiResponse(data=BookCollection(books=[BookRead.model_validate(b) for b in items]))


@router.get("/{book_id}", response_model=ApiResponse[BookEnvelope])
def get_book(book_id: EntityId, books: BookRepository = Depends(get_book_repository)):
    return _envelope(book_service.get_book(books, book_id))


@router.put("/{book_id}", response_model=ApiResponse[BookEnvelope])
def update_book(
    book_id: EntityId,
    body: BookUpdate,
    books: BookRepository = Depends(get_book_repository),
    categories: CategoryRepository = Depends(get_category_repository),
):
    book = book_service.update_book(books, categories, book_id, body)
    return _envelope(book, "Book updated successfully")


@router.delete("/{book_id}", response_model=ApiResponse[None])
def delete_book(book_id: EntityId, books: BookRepository = Depends(get_book_repository)):
    books.delete(book_id)
    return ApiResponse(message="Book deleted successfully")


@router.patch("/{book_id}/stock", response_model=ApiResponse[BookEnvelope])
def update_stock(
    book_id: EntityId,
    body: StockUpdate,
    books: BookRepository = Depends(get_book_repository),
):
    book = book_service.update_stock(books, book_id, body.quantity)
    return _envelope(book, "Stock updated successfully")
