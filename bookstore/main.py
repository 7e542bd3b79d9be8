"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from bookstore.config import Settings, get_settings
from bookstore.core.exceptions import register_exception_handlers
from bookstore.core.logging import configure_logging
from bookstore.core.middleware import setup_middleware
from bookstore.infrastructure.bootstrap import bootstrap_database
from bookstore.infrastructure.database import Database

from bookstore.interfaces.api.auth import router as auth_router
from bookstore.interfaces.api.books import router as books_router
from bookstore.interfaces.api.categories import router as categories_router
from bookstore.interfaces.api.dashboard import router as dashboard_router
from bookstore.interfaces.api.users import router as users_router

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan — startup and shutdown events."""
        logger.info("Starting Bookstore Admin API...", env=settings.ENVIRONMENT)
        database = Database(settings)
        bootstrap_database(database, settings)
        app.state.database = database

        yield

        database.dispose()
        logger.info("Bookstore Admin API stopped")

    app = FastAPI(
        title="Bookstore Admin API",
        description="Inventory management for users, categories and books",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(books_router)
    app.include_router(categories_router)
    app.include_router(users_router)
    app.include_router(dashboard_router)

    @app.get("/")
    def root():
        return {
            "name": "Bookstore Admin API",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
