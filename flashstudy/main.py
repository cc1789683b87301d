"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from flashstudy.config import Settings, configure_logging, get_settings
from flashstudy.infrastructure.common.error_handlers import register_exception_handlers
from flashstudy.infrastructure.common.schemas import HealthResponse
from flashstudy.infrastructure.learning.routers import flashcards, sets
from flashstudy.storage import close_store, get_store, open_store

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        app.state.store = await open_store(settings)
        logger.info("application_started", environment=settings.ENVIRONMENT)
        try:
            yield
        finally:
            await close_store(app.state.store)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(flashcards.router, prefix=settings.API_PREFIX)
    app.include_router(sets.router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request) -> HealthResponse:
        store = get_store(request)
        return HealthResponse(
            status="healthy",
            storage=store.backend,
            fallbacks=store.fallback_count,
        )

    @app.get(f"{settings.API_PREFIX}/")
    async def api_root() -> dict[str, str]:
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "docs": f"{settings.API_PREFIX}/docs",
        }

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "flashstudy.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
