"""
FastAPI application entry point for the Deck Studio API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deckstudio import __version__
from deckstudio.api.errors import setup_error_handlers
from deckstudio.api.export import router as export_router
from deckstudio.api.v1 import v1_router
from deckstudio.infra.config.database import init_models
from deckstudio.infra.config.logging_config import get_logger, setup_logging
from deckstudio.infra.config.settings import get_settings
from deckstudio.infra.middleware.request_context import RequestContextMiddleware
from deckstudio.infra.storage.local_file_store import LocalFileStore

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    LocalFileStore(settings.upload_root).ensure_dirs()

    await init_models()
    logger.info("database.initialized")

    yield

    # Shutdown
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Presentation authoring, generation and export service",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(v1_router, prefix="/api")
    app.include_router(export_router)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "message": "Deck Studio API is running",
            "version": __version__,
            "status": "healthy",
        }

    @app.get("/health")
    async def health_check():
        """Detailed health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "deckstudio.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
