"""Categories API routes — CRUD, dropdown list and book counts."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from bookstore.application.services.category_service import get_category
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.domain.schemas.category import (
    CategoryCollection,
    CategoryCreate,
    CategoryEnvelope,
    CategoryList,
    CategoryRead,
    CategorySimple,
    CategorySimpleCollection,
    CategoryUpdate,
    CategoryWithBookCount,
)
from bookstore.domain.schemas.common import ApiResponse
from bookstore.infrastructure.repositories.query import PageParams
from bookstore.interfaces.api.deps import EntityId, get_current_user
from bookstore.interfaces.deps import get_category_repository

router = APIRouter(prefix="/api/categories", tags=["Categories"], dependencies=[Depends(get_current_user)])


def _envelope(category, message: Optional[str] = None) -> ApiResponse[CategoryEnvelope]:
    return ApiResponse(message=message, data=CategoryEnvelope(category=CategoryRead.model_validate(category)))


@router.post("", response_model=ApiResponse[CategoryEnvelope], status_code=status.HTTP_201_CREATED)
def create_category(body: CategoryCreate, categories: CategoryRepository = Depends(get_category_repository)):
    category = categories.create(body.model_dump())
    return _envelope(category, "Category created successfully")


@router.get("/simple", response_model=ApiResponse[CategorySimpleCollection])
def list_categories_simple(categories: CategoryRepository = Depends(get_category_repository)):
    items = categories.list_simple()
    return ApiResponse(
        data=CategorySimpleCollection(categories=[CategorySimple.model_validate(c) for c in items])
    )


@router.get("/with-book-count", response_model=ApiResponse[CategoryCollection])
@router.get("/with-count", response_model=ApiResponse[CategoryCollection], include_in_schema=False)
def list_categories_with_book_count(categories: CategoryRepository = Depends(get_category_repository)):
    rows = categories.list_with_book_count()
    return ApiResponse(
        data=CategoryCollection(categories=[CategoryWithBookCount(**row) for row in rows])
    )


@router.get("", response_model=ApiResponse[CategoryList])
def list_categories(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    categories: CategoryRepository = Depends(get_category_repository),
):
    result = categories.get_with_filters(PageParams.from_raw(page, limit), search=search)
    return ApiResponse(
        data=CategoryList(
            categories=[CategoryRead.model_validate(c) for c in result.items],
            pagination=result.pagination,
        )
    )


@router.get("/{category_id}", response_model=ApiResponse[CategoryEnvelope])
def get_category_by_id(category_id: EntityId, categories: CategoryRepository = Depends(get_category_repository)):
    return _envelope(get_category(categories, category_id))


@router.put("/{category_id}", response_model=ApiResponse[CategoryEnvelope])
def update_category(
    category_id: EntityId,
    body: CategoryUpdate,
    categories: CategoryRepository = Depends(get_category_repository),
):
    category = categories.update(category_id, body.model_dump())
    return _envelope(category, "Category updated successfully")


@router.delete("/{category_id}", response_model=ApiResponse[None])
def delete_category(category_id: EntityId, categories: CategoryRepository = Depends(get_category_repository)):
    categories.delete(category_id)
    return ApiResponse(message="Category deleted successfully")
