"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flashdeck.config import configure_logging
from flashdeck.core import container
from flashdeck.database import create_tables, dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import DomainError, ValidationError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.learning.routers import (
    decks,
    flashcards,
    stats,
    study,
    sync,
    transfer,
)
from flashdeck.infrastructure.learning.sample_data import generate_sample_data

logger = structlog.get_logger(__name__)


def bootstrap_state() -> None:
    """Load the saved library, or seed the starter decks on first run."""
    settings = container.settings()
    state = container.state()
    loaded = container.snapshot_repository().load()
    if loaded is not None:
        state.restore_from(loaded)
        return
    if settings.SEED_SAMPLE_DATA:
        decks, cards = generate_sample_data(settings.DECK_COLOR_PALETTE, container.rng())
        state.replace_collection(decks, cards)
        container.sync_outbox().sync_all(decks, cards)
        logger.info("seeded_sample_data", decks=len(decks), flashcards=len(cards))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = container.settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_tables()
    bootstrap_state()

    outbox = container.sync_outbox()
    await outbox.start()
    logger.info("application_started", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        await outbox.stop()
        container.snapshot_repository().save(container.state())
        await container.bundle_fetcher().close()
        dispose_engine()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    settings = container.settings()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FlashdeckError)
    async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
        logger.warning(
            "request_failed",
            method=request.method,
            path=request.url.path,
            error=type(exc).__name__,
            detail=exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = (
            status.HTTP_422_UNPROCESSABLE_ENTITY
            if isinstance(exc, ValidationError)
            else status.HTTP_400_BAD_REQUEST
        )
        logger.warning(
            "domain_rule_rejected",
            method=request.method,
            path=request.url.path,
            error=type(exc).__name__,
            detail=exc.message,
        )
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    for module in (decks, flashcards, study, stats, transfer, sync):
        app.include_router(module.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    async def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()
