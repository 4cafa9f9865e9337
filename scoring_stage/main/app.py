"""
Main Application - Main Layer

Entry point of the request adapter. Initializes the container, creates
the FastAPI app and includes the scoring routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scoring_stage.main.config import get_settings
from scoring_stage.main.container import app_lifespan, init_container
from scoring_stage.presentation.controllers import scoring_router, system_router
from scoring_stage.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Bootstrap logging before the settings are loaded
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Delegates to the container lifespan, which loads the model
    specification and fails startup if it cannot.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.api.title,
        description=settings.api.description,
        version=settings.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scoring_router)
    app.include_router(system_router)

    return app


app = create_app()
