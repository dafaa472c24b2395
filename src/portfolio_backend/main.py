"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_backend.config import settings
from portfolio_backend.exception_handlers import register_exception_handlers
from portfolio_backend.init_db import init_database
from portfolio_backend.logging_config import setup_logging
from portfolio_backend.routers import admin, health, skills


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables before serving requests."""
    init_database()
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        App with logging, CORS, error envelopes and all routers mounted
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Portfolio Skills API",
        description="Backend API serving the skills shown on the portfolio website",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware to allow the frontend to call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount routers
    app.include_router(skills.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app


app = create_app()
