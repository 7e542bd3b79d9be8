"""Bookstore Admin — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    # Leave empty to build the URL from the DB_* parts below.
    DATABASE_URL: str = ""
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "bookstore"
    DB_PASSWORD: str = ""
    DB_NAME: str = "bookstore_admin"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 60
    DB_ECHO: bool = False

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60 * 24
    BCRYPT_ROUNDS: int = 12

    # Seed data
    ADMIN_NAME: str = "Admin User"
    ADMIN_EMAIL: str = "admin@bookstore.com"
    ADMIN_PASSWORD: str = "admin123"

    # Inventory
    LOW_STOCK_THRESHOLD: int = 10

    # HTTP
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
