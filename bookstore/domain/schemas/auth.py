"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from bookstore.domain.schemas.pagination import Pagination

PHONE_PATTERN = r"^\+?[1-9]\d{0,15}$"

Role = Literal["admin", "user"]


def normalize_email(value):
    return value.strip().lower() if isinstance(value, str) else value


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6)
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return normalize_email(value)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return normalize_email(value)


class UserUpdate(ProfileUpdate):
    role: Optional[Role] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return normalize_email(value)


class AuthPayload(BaseModel):
    user: UserRead
    token: str


class UserEnvelope(BaseModel):
    user: UserRead


class UserList(BaseModel):
    users: List[UserRead]
    pagination: Pagination
