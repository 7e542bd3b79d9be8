"""Dashboard API — aggregated inventory data for the admin dashboard."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from bookstore.config import Settings
from bookstore.domain.repositories.book_repository import BookRepository
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.domain.schemas.book import BookRead, BookStats
from bookstore.domain.schemas.category import CategoryWithBookCount
from bookstore.domain.schemas.common import ApiResponse
from bookstore.interfaces.api.deps import get_current_user
from bookstore.interfaces.deps import get_app_settings, get_book_repository, get_category_repository

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_user)])

# Rows shown in the dashboard's low-stock panel
LOW_STOCK_PREVIEW = 5


class DashboardSummary(BaseModel):
    stats: BookStats
    low_stock: list[BookRead]
    categories: list[CategoryWithBookCount]


@router.get("/summary", response_model=ApiResponse[DashboardSummary])
def dashboard_summary(
    books: BookRepository = Depends(get_book_repository),
    categories: CategoryRepository = Depends(get_category_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Stats, the scarcest books and per-category counts in a single request."""
    low_stock = books.get_low_stock(settings.LOW_STOCK_THRESHOLD)[:LOW_STOCK_PREVIEW]
    return ApiResponse(
        data=DashboardSummary(
            stats=books.get_stats(settings.LOW_STOCK_THRESHOLD),
            low_stock=[BookRead.model_validate(b) for b in low_stock],
            categories=[CategoryWithBookCount(**row) for row in categories.list_with_book_count()],
        )
    )
