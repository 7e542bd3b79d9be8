"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.sql import func

from bookstore.infrastructure.database import Base

ROLES = ("admin", "user")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20), nullable=True)
    # Holds the bcrypt hash, never the plaintext
    password_hash = Column("password", String(255), nullable=False)
    role = Column(Enum(*ROLES, name="user_role"), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __repr__(self):
        return f"<User {self.email}>"
