"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, kram.api, kram.observability, kram.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from kram.api import api_router
from kram.api.routers.kram.kram_error_handling import (
    kram_exception_handler,
    request_validation_handler,
)
from kram.boundary.ai import create_ai_client
from kram.boundary.db import create_engine_from_settings, create_session_factory
from kram.boundary.db.create_tables import create_all_tables
from kram.configs import get_settings
from kram.core.exceptions import AIClientNotConfiguredError, KramException
from kram.observability.logger import configure_logging
from kram.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the database engine, session factory and AI client once and
    stores them on ``app.state`` for the dependencies to pick up.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    engine = create_engine_from_settings(settings.database)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    if settings.database.auto_create_tables:
        await create_all_tables(engine)

    try:
        app.state.ai_client = create_ai_client(settings.openai)
        logger.info("OpenAI client initialized successfully")
    except AIClientNotConfiguredError:
        # Tag and gallery routes still work; generation answers 503
        logger.warning("OPENAI_API_KEY not set, generation endpoint disabled")
        app.state.ai_client = None

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Kram Pattern API",
        description="AI-generated Thai indigo textile patterns with a searchable gallery",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(KramException, kram_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register API routes
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "kram.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
