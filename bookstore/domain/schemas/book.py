"""Pydantic schemas for Book domain."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore.domain.schemas.pagination import Pagination
from bookstore.infrastructure.repositories.query import MAX_INT

# NUMERIC(10, 2)
MAX_PRICE = 99_999_999.99


class BookBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    author: str = Field(min_length=1, max_length=255)
    isbn: str = Field(min_length=8, max_length=13)
    price: float = Field(ge=0, le=MAX_PRICE)
    quantity: int = Field(ge=0, le=MAX_INT)
    category_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    description: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("title", "author", "isbn", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class BookCreate(BookBase):
    pass


class BookUpdate(BookBase):
    pass


class StockUpdate(BaseModel):
    # Negative values are refused by the service with its own message
    quantity: int = Field(le=MAX_INT)


class BookRead(BaseModel):
    id: int
    title: str
    author: str
    isbn: str
    price: float
    quantity: int
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BookStats(BaseModel):
    total_books: int = Field(alias="totalBooks")
    total_categories: int = Field(alias="totalCategories")
    low_stock_books: int = Field(alias="lowStockBooks")
    total_value: float = Field(alias="totalValue")

    model_config = ConfigDict(populate_by_name=True)


class BookList(BaseModel):
    books: List[BookRead]
    pagination: Pagination


class BookEnvelope(BaseModel):
    book: BookRead


class BookCollection(BaseModel):
    books: List[BookRead]


class LowStockCollection(BookCollection):
    threshold: int
