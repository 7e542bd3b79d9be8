"""Pydantic schemas for Category domain."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from bookstore.domain.schemas.pagination import Pagination


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class CategoryUpdate(CategoryCreate):
    pass


class CategoryRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CategorySimple(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class CategoryWithBookCount(CategoryRead):
    book_count: int = 0


class CategoryList(BaseModel):
    categories: List[CategoryRead]
    pagination: Pagination


class CategoryEnvelope(BaseModel):
    category: CategoryRead


class CategoryCollection(BaseModel):
    categories: List[CategoryWithBookCount]


class CategorySimpleCollection(BaseModel):
    categories: List[CategorySimple]
