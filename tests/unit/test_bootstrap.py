"""
Tests for table creation and default seeding.
"""

from bookstore.application.services.auth_service import verify_password
from bookstore.domain.models.category import Category
from bookstore.domain.models.user import User
from bookstore.infrastructure.bootstrap import bootstrap_database, seed_categories
from bookstore.infrastructure.database import Database
from bookstore.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository


def _counts(database):
    with database.session() as db:
        return db.query(User).count(), db.query(Category).count()


class TestBootstrap:
    """Seeding runs once and never duplicates rows."""

    def test_fresh_database_is_seeded(self, settings):
        database = Database(settings)
        try:
            bootstrap_database(database, settings)

            assert database.bootstrapped is True
            assert _counts(database) == (1, 2)
            with database.session() as db:
                admin = db.query(User).one()
                assert admin.email == settings.ADMIN_EMAIL
                assert admin.role == "admin"
                assert admin.password_hash != settings.ADMIN_PASSWORD
                assert verify_password(settings.ADMIN_PASSWORD, admin.password_hash)
                assert admin.password_hash.startswith(f"$2b${settings.BCRYPT_ROUNDS:02d}$")
                names = sorted(c.name for c in db.query(Category).all())
                assert names == ["Fiction", "Non-Fiction"]
        finally:
            database.dispose()

    def test_second_run_is_a_no_op(self, settings):
        database = Database(settings)
        try:
            bootstrap_database(database, settings)
            bootstrap_database(database, settings)

            assert _counts(database) == (1, 2)
        finally:
            database.dispose()

    def test_restart_on_existing_file_adds_nothing(self, settings):
        first = Database(settings)
        bootstrap_database(first, settings)
        first.dispose()

        second = Database(settings)
        try:
            assert second.bootstrapped is False
            bootstrap_database(second, settings)

            assert _counts(second) == (1, 2)
        finally:
            second.dispose()

    def test_categories_not_reseeded_into_populated_table(self, db_session):
        categories = SQLAlchemyCategoryRepository(db_session, Category)
        categories.create({"name": "Poetry"})

        assert seed_categories(categories) == 0
        assert categories.count() == 1
