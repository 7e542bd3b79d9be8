"""Users API routes — admin-only account management."""

from typing import Optional

from fastapi import APIRouter, Depends

from bookstore.application.services.user_service import delete_user, get_user, update_user
from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.domain.schemas.auth import UserEnvelope, UserList, UserRead, UserUpdate
from bookstore.domain.schemas.common import ApiResponse
from bookstore.infrastructure.repositories.query import PageParams
from bookstore.interfaces.api.deps import EntityId, require_admin
from bookstore.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"], dependencies=[Depends(require_admin)])


@router.get("", response_model=ApiResponse[UserList])
def list_users(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    users: UserRepository = Depends(get_user_repository),
):
    result = users.get_with_filters(PageParams.from_raw(page, limit), search=search)
    return ApiResponse(
        data=UserList(users=[UserRead.model_validate(u) for u in result.items], pagination=result.pagination)
    )


@router.get("/{user_id}", response_model=ApiResponse[UserEnvelope])
def get_user_by_id(user_id: EntityId, users: UserRepository = Depends(get_user_repository)):
    return ApiResponse(data=UserEnvelope(user=UserRead.model_validate(get_user(users, user_id))))


@router.put("/{user_id}", response_model=ApiResponse[UserEnvelope])
def put_user(user_id: EntityId, body: UserUpdate, users: UserRepository = Depends(get_user_repository)):
    user = update_user(users, user_id, body)
    return ApiResponse(message="User updated successfully", data=UserEnvelope(user=UserRead.model_validate(user)))


@router.delete("/{user_id}", response_model=ApiResponse[None])
def remove_user(
    user_id: EntityId,
    admin: User = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
):
    delete_user(users, user_id, admin.id)
    return ApiResponse(message="User deleted successfully")
