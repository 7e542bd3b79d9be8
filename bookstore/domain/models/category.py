"""Category domain model — maps to the 'categories' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from bookstore.infrastructure.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Category {self.id} - {self.name}>"
