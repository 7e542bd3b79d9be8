"""
Pytest configuration and fixtures for Bookstore Admin tests.
"""

import os

# Must be set before anything under bookstore reads the settings
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from bookstore.config import Settings
from bookstore.domain.models.book import Book
from bookstore.domain.models.category import Category
from bookstore.domain.models.user import User
from bookstore.infrastructure.database import Database
from bookstore.infrastructure.repositories.book_repository import SQLAlchemyBookRepository
from bookstore.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from bookstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from bookstore.main import create_app

ADMIN_EMAIL = "admin@bookstore.com"
ADMIN_PASSWORD = "admin123"


# =============================================================================
# Settings / Database
# =============================================================================

@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file for each test."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'bookstore.db'}",
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
def database(settings):
    db = Database(settings)
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def book_repo(db_session):
    return SQLAlchemyBookRepository(db_session, Book)


@pytest.fixture
def category_repo(db_session):
    return SQLAlchemyCategoryRepository(db_session, Category)


@pytest.fixture
def user_repo(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def make_book(book_repo):
    """Insert a book with sensible defaults; ISBNs stay unique per call."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "title": f"Book {counter['n']}",
            "author": "Some Author",
            "isbn": f"97800000{counter['n']:05d}",
            "price": 10.0,
            "quantity": 5,
            "category_id": None,
            "description": None,
            "image_url": None,
        }
        data.update(overrides)
        return book_repo.create(data)

    return _make


# =============================================================================
# API
# =============================================================================

@pytest.fixture
def client(settings):
    """TestClient with the lifespan (bootstrap) run against the test DB."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return _bearer(response.json()["data"]["token"])


@pytest.fixture
def user_headers(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Regular User", "email": "reader@example.com", "password": "secret1"},
    )
    assert response.status_code == 201
    return _bearer(response.json()["data"]["token"])


@pytest.fixture
def sample_book_data():
    return {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "isbn": "9780261102217",
        "price": 12.5,
        "quantity": 5,
        "description": "There and back again",
    }
