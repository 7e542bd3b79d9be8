"""Book domain model — maps to the 'books' table."""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Text, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bookstore.infrastructure.database import Base
from bookstore.domain.models.category import Category


class Book(Base):
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_books_quantity_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=False, index=True)
    isbn = Column(String(50), unique=True, nullable=False, index=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    # Nullable: the schema lets a category go away, the repository refuses to
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    description = Column(Text, nullable=True)
    # May hold a base64 data URI
    image_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    category = relationship(Category, lazy="joined", innerjoin=False)

    @property
    def category_name(self):
        return self.category.name if self.category is not None else None

    def __repr__(self):
        return f"<Book {self.isbn} - {self.title}>"
