"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from lyriclearn.config.settings import Settings, get_settings
from lyriclearn.core.dependencies import ServiceContainer
from lyriclearn.core.error_handlers import setup_error_handlers
from lyriclearn.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service_container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use instead of the global instance
        service_container: Pre-built container (tests inject one with a fixed
            frequency table)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Load the frequency table once and tear the scorers down at shutdown.
        """
        configure_logging(
            level=settings.log_level.value,
            json_format=settings.log_json,
            log_file=settings.log_file,
        )
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")

        container = service_container or ServiceContainer()
        try:
            container.initialize_services(settings)
            app.state.service_container = container

            if settings.database.auto_create_tables:
                from lyriclearn.core.db import create_tables
                create_tables()
                logger.info("Database tables created")

            logger.info("Application startup complete")

            yield

        except Exception as e:
            logger.error(f"Application startup failed: {e}", exc_info=True)
            raise

        finally:
            logger.info("Shutting down application")
            container.cleanup_services()
            logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request {request_id} started: {request.method} {request.url.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
                'client_ip': request.client.host if request.client else 'unknown'
            }
        )

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"Request {request_id} completed: {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )

        response.headers["X-Request-ID"] = request_id
        return response

    from lyriclearn.api.health_endpoints import router as health_router
    from lyriclearn.api.scoring_endpoints import router as scoring_router
    from lyriclearn.api.phrase_endpoints import router as phrase_router
    from lyriclearn.api.vocabulary_endpoints import router as vocabulary_router
    from lyriclearn.api.difficulty_endpoints import router as difficulty_router
    app.include_router(health_router)
    app.include_router(scoring_router)
    app.include_router(phrase_router)
    app.include_router(vocabulary_router)
    app.include_router(difficulty_router)

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
