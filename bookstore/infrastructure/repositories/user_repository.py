"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, Optional

from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.infrastructure.repositories.base_repository import SQLAlchemyRepository
from bookstore.infrastructure.repositories.query import PageParams, PageResult, QueryFilter


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy.

    Emails are stored lower-cased; lookups normalize the same way.
    """

    entity_name = "User"

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def get_with_filters(self, params: PageParams, search: Optional[str] = None) -> PageResult[User]:
        query_filter = QueryFilter().search(search, User.name, User.email)
        return self.list(params, query_filter)

    def create(self, obj_in: Any) -> User:
        data = dict(obj_in)
        data["email"] = normalize_email(data["email"])
        data.setdefault("role", "user")
        return super().create(data)

    def update(self, id: int, obj_in: Any) -> User:
        data = dict(obj_in)
        if data.get("email"):
            data["email"] = normalize_email(data["email"])
        return super().update(id, data)
