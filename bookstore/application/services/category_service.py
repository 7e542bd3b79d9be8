"""Category service — lookups that must exist."""

from bookstore.core.exceptions import EntityNotFoundException
from bookstore.domain.models.category import Category
from bookstore.domain.repositories.category_repository import CategoryRepository


def get_category(categories: CategoryRepository, category_id: int) -> Category:
    category = categories.get_by_id(category_id)
    if category is None:
        raise EntityNotFoundException("Category not found", {"id": category_id})
    return category
