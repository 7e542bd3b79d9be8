"""User administration — admin-only account management."""

from bookstore.application.services.auth_service import ensure_email_available
from bookstore.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.domain.schemas.auth import UserUpdate


def get_user(users: UserRepository, user_id: int) -> User:
    user = users.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", {"id": user_id})
    return user


def update_user(users: UserRepository, user_id: int, body: UserUpdate) -> User:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes:
        ensure_email_available(users, changes["email"], user_id)
    return users.update(user_id, changes)


def delete_user(users: UserRepository, user_id: int, acting_user_id: int) -> None:
    if user_id == acting_user_id:
        raise BusinessRuleViolationException("You cannot delete your own account", {"id": user_id})
    users.delete(user_id)
