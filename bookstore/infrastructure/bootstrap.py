"""Schema bootstrapper — create tables and seed the rows a fresh install needs."""

import structlog

from bookstore.application.services.auth_service import hash_password
from bookstore.config import Settings
from bookstore.domain.models.category import Category
from bookstore.domain.models.user import User
from bookstore.infrastructure.database import Database
from bookstore.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from bookstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORIES = (
    {
        "name": "Fiction",
        "description": "Fictional literature including novels and short stories",
    },
    {
        "name": "Non-Fiction",
        "description": "Non-fictional books including biographies, history, and science",
    },
)


def seed_admin(users: SQLAlchemyUserRepository, settings: Settings) -> bool:
    """Create the admin account unless one with that email exists."""
    if users.get_by_email(settings.ADMIN_EMAIL) is not None:
        return False

    users.create({
        "name": settings.ADMIN_NAME,
        "email": settings.ADMIN_EMAIL,
        "password_hash": hash_password(settings.ADMIN_PASSWORD, settings.BCRYPT_ROUNDS),
        "role": "admin",
    })
    logger.info("Default admin user created", email=settings.ADMIN_EMAIL)
    return True


def seed_categories(categories: SQLAlchemyCategoryRepository) -> int:
    """Insert the default categories only into an empty table."""
    if categories.count():
        return 0

    for category in DEFAULT_CATEGORIES:
        categories.create(category)
    logger.info("Default categories created", count=len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)


def bootstrap_database(database: Database, settings: Settings) -> None:
    """Create missing tables and seed defaults. Runs once per Database."""
    if database.bootstrapped:
        return

    database.create_tables()
    logger.info("Database tables created/verified")

    with database.session() as db:
        seed_admin(SQLAlchemyUserRepository(db, User), settings)
        seed_categories(SQLAlchemyCategoryRepository(db, Category))

    database.bootstrapped = True
