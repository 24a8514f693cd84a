"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from salesapp import __version__
from salesapp.api.v1 import order_router, person_router, product_router
from salesapp.api.v1.errors import request_validation_handler
from salesapp.core.config import get_settings
from salesapp.core.logging_config import setup_logging
from salesapp.utils.datetime_utils import now_iso

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Request validation errors reported as 400
    - Startup/shutdown event handlers for the storage backend

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging()

    application = FastAPI(
        title=settings.app_name,
        description="Sales management API: people, products and orders",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register API routers
    application.include_router(person_router, prefix="/people")
    application.include_router(product_router, prefix="/products")
    application.include_router(order_router, prefix="/orders")

    @application.on_event("startup")
    async def startup_event():
        """
        Prepare storage when FastAPI starts.

        1. Build the DI container (database → repositories → services)
        2. Create indexes and insert seed data if enabled
        """
        from salesapp.di.container import get_container

        container = get_container()
        container.initialize_storage()
        logger.info("%s started (storage backend: %s)", settings.app_name, settings.storage_backend)

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release database connections when FastAPI shuts down."""
        from salesapp.di.container import get_container

        get_container().shutdown()
        logger.info("%s stopped", settings.app_name)

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": settings.app_name,
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok", "ts": now_iso()}

    return application


# Create application instance
app = create_application()
