"""FastAPI dependency — JWT auth middleware."""

from typing import Annotated, Optional

from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from bookstore.application.services.auth_service import decode_access_token
from bookstore.config import Settings
from bookstore.core.exceptions import ForbiddenException, UnauthorizedException
from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.infrastructure.repositories.query import MAX_INT
from bookstore.interfaces.deps import get_app_settings, get_user_repository

security = HTTPBearer(auto_error=False)

# Path ids outside the INTEGER column range are rejected before any query runs
EntityId = Annotated[int, Path(ge=1, le=MAX_INT)]


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise UnauthorizedException("Access token required")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None or payload.get("id") is None:
        raise UnauthorizedException("Invalid or expired token")

    user = users.get_by_id(payload["id"])
    if user is None:
        raise UnauthorizedException("User not found")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise ForbiddenException("Admin access required")
    return user
