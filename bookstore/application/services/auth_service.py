"""Auth service — JWT token management, password hashing and account flows."""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore.config import Settings
from bookstore.core.exceptions import DuplicateEntityException, UnauthorizedException
from bookstore.domain.models.user import User
from bookstore.domain.repositories.user_repository import UserRepository
from bookstore.domain.schemas.auth import ProfileUpdate, UserCreate

logger = structlog.get_logger(__name__)


@lru_cache
def password_context(rounds: int = 12) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: int = 12) -> str:
    return password_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # The cost factor is read back from the hash itself
    return password_context().verify(plain_password, hashed_password)


def create_access_token(user: User, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode = {
        "sub": user.email,
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def authenticate_user(users: UserRepository, email: str, password: str) -> User:
    user = users.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Login attempt rejected", email=email)
        raise UnauthorizedException("Invalid email or password")
    logger.info("User logged in", user_id=user.id)
    return user


def ensure_email_available(users: UserRepository, email: str, user_id: Optional[int] = None) -> None:
    """Raise if ``email`` belongs to a user other than ``user_id``."""
    existing = users.get_by_email(email)
    if existing is not None and existing.id != user_id:
        raise DuplicateEntityException("User with this email already exists", {"email": email})


def register_user(users: UserRepository, body: UserCreate, settings: Settings) -> User:
    """Self-service sign-up. New accounts are always plain users."""
    ensure_email_available(users, body.email)
    return users.create({
        "name": body.name,
        "email": body.email,
        "phone": body.phone,
        "password_hash": hash_password(body.password, settings.BCRYPT_ROUNDS),
        "role": "user",
    })


def create_user(
    users: UserRepository,
    settings: Settings,
    name: str,
    email: str,
    password: str,
    role: str = "user",
    phone: str = None,
) -> User:
    ensure_email_available(users, email)
    return users.create({
        "name": name,
        "email": email,
        "phone": phone,
        "password_hash": hash_password(password, settings.BCRYPT_ROUNDS),
        "role": role,
    })


def update_profile(users: UserRepository, user_id: int, body: ProfileUpdate) -> User:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes:
        ensure_email_available(users, changes["email"], user_id)
    return users.update(user_id, changes)
