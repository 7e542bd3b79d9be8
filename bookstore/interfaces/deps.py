"""
API Dependencies — repositories bound to the request's session.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from bookstore.config import Settings
from bookstore.domain.models.book import Book
from bookstore.domain.models.category import Category
from bookstore.domain.models.user import User
from bookstore.domain.repositories.book_repository import BookRepository
from bookstore.domain.repositories.category_repository import CategoryRepository
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.infrastructure.database import get_db
from bookstore.infrastructure.repositories.book_repository import SQLAlchemyBookRepository
from bookstore.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from bookstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    """Get book repository instance."""
    return SQLAlchemyBookRepository(db, Book)


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    """Get category repository instance."""
    return SQLAlchemyCategoryRepository(db, Category)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
