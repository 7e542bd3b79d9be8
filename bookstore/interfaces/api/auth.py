"""Auth API routes — login, register, profile."""

from fastapi import APIRouter, Depends, status

from bookstore.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    register_user,
    update_profile,
)
from bookstore.config import Settings
from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.domain.schemas.auth import (
    AuthPayload,
    LoginRequest,
    ProfileUpdate,
    UserCreate,
    UserEnvelope,
    UserRead,
)
from bookstore.domain.schemas.common import ApiResponse
from bookstore.interfaces.api.deps import get_current_user
from bookstore.interfaces.deps import get_app_settings, get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=ApiResponse[AuthPayload])
def login(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    user = authenticate_user(users, body.email, body.password)
    return ApiResponse(
        message="Login successful",
        data=AuthPayload(user=UserRead.model_validate(user), token=create_access_token(user, settings)),
    )


@router.post("/register", response_model=ApiResponse[AuthPayload], status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    user = register_user(users, body, settings)
    return ApiResponse(
        message="User registered successfully",
        data=AuthPayload(user=UserRead.model_validate(user), token=create_access_token(user, settings)),
    )


@router.get("/profile", response_model=ApiResponse[UserEnvelope])
def get_profile(user: User = Depends(get_current_user)):
    return ApiResponse(data=UserEnvelope(user=UserRead.model_validate(user)))


@router.put("/profile", response_model=ApiResponse[UserEnvelope])
def put_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    updated = update_profile(users, user.id, body)
    return ApiResponse(
        message="Profile updated successfully",
        data=UserEnvelope(user=UserRead.model_validate(updated)),
    )
